import pytest

from chipdna.errorcodes import PaymentDeviceErrorCode, parse_error_code


@pytest.mark.parametrize(
    "name, member",
    [
        ("PaymentDeviceNotInitialized", PaymentDeviceErrorCode.PAYMENT_DEVICE_NOT_INITIALIZED),
        ("PinpadP2PeDisabled", PaymentDeviceErrorCode.PINPAD_P2_PE_DISABLED),
        ("PinPadAmountInvalid", PaymentDeviceErrorCode.PIN_PAD_AMOUNT_INVALID),
        ("PinpadAmountTooLarge", PaymentDeviceErrorCode.PINPAD_AMOUNT_TOO_LARGE),
        ("DeviceConfigTcpIpValueError", PaymentDeviceErrorCode.DEVICE_CONFIG_TCP_IP_VALUE_ERROR),
        ("ChipCardholderVerificationMethodFailure",
         PaymentDeviceErrorCode.CHIP_CARDHOLDER_VERIFICATION_METHOD_FAILURE),
        ("CardHolderActionTimedOut", PaymentDeviceErrorCode.CARD_HOLDER_ACTION_TIMED_OUT),
        ("OnlinePinKeyMissing", PaymentDeviceErrorCode.ONLINE_PIN_KEY_MISSING),
    ],
)
def test_parse_known_tokens(name, member):
    assert parse_error_code(name) is member
    assert member.token == name


def test_every_member_round_trips():
    for member in PaymentDeviceErrorCode:
        assert parse_error_code(member.token) is member


def test_tokens_are_unique():
    tokens = [member.token for member in PaymentDeviceErrorCode]
    parsed = {parse_error_code(token) for token in tokens}
    assert len(parsed) == len(tokens)


def test_values_are_sequential_from_zero():
    values = [int(parse_error_code(member.token)) for member in PaymentDeviceErrorCode]
    assert values == list(range(len(values)))
    assert int(parse_error_code("PaymentDeviceNotInitialized")) == 0
    assert int(parse_error_code("ErrorParsingAmount")) == 1
    assert int(parse_error_code("OnlinePinKeyMissing")) == len(values) - 1


@pytest.mark.parametrize("name", ["", "pinpadp2pedisabled", "NotARealCode", "PINPAD_P2_PE_DISABLED"])
def test_unknown_token_raises(name):
    with pytest.raises(ValueError):
        parse_error_code(name)