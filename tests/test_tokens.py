import pytest

from chipdna.tokens import (
    CardSchemeId,
    ChipDnaServerIssue,
    ConfigurationUpdate,
    CredentialOnFileReason,
    DeferredAuthorizationReason,
    PauseTransactionState,
    PaymentDeviceAvailabilityError,
    PaymentDeviceConfigurationState,
    PaymentPlatformState,
    card_scheme_from_code,
    parse_token,
)

ALL_ENUMS = [
    CardSchemeId,
    ChipDnaServerIssue,
    ConfigurationUpdate,
    CredentialOnFileReason,
    PauseTransactionState,
    PaymentDeviceAvailabilityError,
    PaymentDeviceConfigurationState,
    PaymentPlatformState,
]


def test_card_scheme_codes_fixed_by_source():
    assert card_scheme_from_code(1241) is CardSchemeId.INTERAC
    assert card_scheme_from_code(3721) is CardSchemeId.LASER
    assert card_scheme_from_code(101) is CardSchemeId.VALUE_LINK


def test_card_scheme_code_round_trip():
    for member in CardSchemeId:
        assert card_scheme_from_code(int(member)) is member


def test_unknown_card_scheme_code():
    with pytest.raises(ValueError):
        card_scheme_from_code(13)


def test_wire_tokens():
    assert parse_token(CardSchemeId, "MasterCard") is CardSchemeId.MASTER_CARD
    assert parse_token(CredentialOnFileReason, "ReAuth") is CredentialOnFileReason.RE_AUTH
    assert (
        parse_token(PaymentDeviceAvailabilityError, "DeviceModelMismatchAfterReboot")
        is PaymentDeviceAvailabilityError.DEVICE_MODEL_MISMATCH_AFTER_REBOOT
    )
    assert parse_token(ChipDnaServerIssue, "None") is ChipDnaServerIssue.NONE


def test_ordinals_follow_declaration_order():
    uninitialized = parse_token(ChipDnaServerIssue, "Uninitialized")
    none = parse_token(ChipDnaServerIssue, "None")
    assert int(uninitialized) == 0
    assert int(none) == 1
    assert int(parse_token(ChipDnaServerIssue, "InScheduleUpdateTime")) == 10
    assert int(parse_token(PaymentPlatformState, "Unavailable")) == 0
    assert int(parse_token(PaymentPlatformState, "Available")) == 1


def test_deferred_reason_parses_known_tokens():
    for name in ("None", "ConnectionFailed", "CommunicationFailed", "ProcessingFailed"):
        assert parse_token(DeferredAuthorizationReason, name).token == name


def test_offline_only_has_no_string_form():
    with pytest.raises(ValueError):
        parse_token(DeferredAuthorizationReason, "OfflineOnly")


def test_unknown_token_raises():
    with pytest.raises(ValueError):
        parse_token(PaymentPlatformState, "Sometimes")


def test_token_lookup_is_case_sensitive():
    with pytest.raises(ValueError):
        parse_token(CardSchemeId, "visa")