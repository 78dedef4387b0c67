# chipdna

`chipdna` is a pure-Python library for clients of a ChipDNA payment server. It
provides the data model, XML parsing, message framing and event routing that
such a client needs. It has no dependencies outside the standard library.

## Modules

### `chipdna.tokens`

This module holds integer enums for the values the server sends:

- `CardSchemeId`
- `ChipDnaServerIssue`
- `ConfigurationUpdate`
- `CredentialOnFileReason`
- `DeferredAuthorizationReason`
- `PauseTransactionState`
- `PaymentDeviceAvailabilityError`
- `PaymentDeviceConfigurationState`
- `PaymentPlatformState`

Each member has a `.token` property. It gives the CamelCase name used on the
wire, for example `CardSchemeId.MASTER_CARD.token == "MasterCard"`.

Two functions convert incoming values to members:

- `parse_token(enum_cls, name)` returns the member whose token is `name`.
- `card_scheme_from_code(code)` returns the `CardSchemeId` that has the given
  numeric code.

Both raise `ValueError` for unknown input. `parse_token` also rejects
`DeferredAuthorizationReason.OFFLINE_ONLY`, because that member has no string
form on the wire.

### `chipdna.errorcodes`

- `PaymentDeviceErrorCode` enumerates the payment device error codes. Each
  code has a `.token` property.
- `parse_error_code(name)` maps a wire token to its code. It raises
  `ValueError` if the token is unknown.

### `chipdna.parameters`

- `Parameter` is a frozen key/value pair. `str()` renders it as `key=value`.
- `ParameterSet` is a string map that iterates in key order.
  - Integer values are stored as decimal strings.
  - `add(key, value)` sets a value and `remove(key)` deletes one.
  - `get_value(key)` returns a value and raises `KeyError` if the key is
    missing.
  - `to_dict()` returns the contents as a dict sorted by key.
  - `len()` and `in` work as for a mapping.
  - Iterating yields `Parameter` objects.
  - `+=` merges another set into this one.
  - `str()` joins the parameters with `", "`.

### `chipdna.cardhash`

- `parse_card_hashes(xml)` reads an `ArrayOfCardHash` document and returns a
  list of `CardHash` objects. Each has `scope`, `source` and `value`.
- Input that cannot be read gives an empty list.

### `chipdna.cardstatus`

- `parse_card_status(xml)` reads an `ArrayOfDeviceCardStatus` document and
  returns a `CardStatus`.
- `CardStatus` holds a list of `DeviceCardStatus` entries. Each entry has
  `payment_device_model`, `payment_device_id` and `card_insertion_status`.

### `chipdna.status_parts`

This module holds the parts of the status report: `VersionInfo`,
`PaymentPlatformStatus`, `RequestQueueStatus`, `ServerStatus`, `TmsStatus`,
`PaymentDeviceStatus`, `VirtualTerminalStatus` and
`PaymentDeviceAvailabilityErrorInformation`.

Each part renders a one-line summary with `str()`. The summary is empty when
the part holds no data. Some parts have extra helpers:

- `PaymentPlatformStatus.state_token()` parses the state into its enum. It
  raises `ValueError` for unknown values.
- `ServerStatus.server_issue()` parses the server issue into its enum. It
  raises `ValueError` for unknown values.
- `PaymentDeviceStatus.configuration_state_token()` and
  `PaymentDeviceStatus.availability_error_token()` parse those fields into
  their enums. Both raise `ValueError` for unknown values.
- `RequestQueueStatus.total_request_count()` sums the request counts.
- `TmsStatus.days_until_config_update_is_required()` returns the number of days
  as an integer.

`to_bool(text)` treats `"True"`, `"true"` and `"Y"` as true and any other
value as false.

### `chipdna.status`

- `ChipDnaStatus.from_xml(version_xml, device_xml, platform_xml, server_xml,
  tms_xml, virtual_terminal_xml, queue_xml)` builds the full report from the XML
  of each section.
  - A section that cannot be read keeps its default values.
  - `queue_xml=None` means the report has no request queue section.
  - `str()` on the result renders the whole report.
- `parse_availability_error_information(xml)` decodes an
  `ArrayOfPaymentDeviceAvailabilityErrorInformation` document.

### `chipdna.framing`

- `encode_frame(payload)` wraps text or bytes between an `STX` byte and an
  `ETX` byte.
- `FrameDecoder.feed(data)` adds incoming bytes to a buffer. It returns every
  message those bytes complete.
  - If a second `STX` arrives before an `ETX`, the partial message is dropped.
  - Bytes outside any frame are discarded.
- `FrameDecoder.pending()` returns the bytes held back while the decoder waits
  for the rest of a message.

### `chipdna.events`

- `Command` and `EventType` are string enums of the protocol's command and
  event names.
- `os_name()` returns the operating system name that the client reports.
- `register_parameters(os=None)` builds the `ParameterSet` that identifies the
  client when it registers. It includes the `CLIENT_*` tags.
- `EventDispatcher` holds at most one callback per event type and is
  thread-safe.
  - `on(event_type, callback)` registers a callback and `off(event_type)`
    removes it.
  - `dispatch(event_type, params)` calls the registered callback and returns
    `True` if one was called.
  - Error events pass the parameters as text. All other events pass them as a
    dict sorted by key.

## Example

```python
from chipdna.framing import FrameDecoder, encode_frame
from chipdna.events import EventDispatcher, EventType

decoder = FrameDecoder()
messages = decoder.feed(encode_frame(b"<Response/>"))
assert messages == ["<Response/>"]

dispatcher = EventDispatcher()
dispatcher.on(EventType.TRANSACTION_FINISHED, lambda params: print(params))
dispatcher.dispatch(EventType.TRANSACTION_FINISHED, {"RESULT": "APPROVED"})
```

## What it does not do

This package contains no network client. It does not do any of the following:

- open or keep a connection to the server, with or without TLS
- reconnect after a connection drops
- build the XML of outgoing requests or read the XML of responses
- send commands or wait for their replies
- parse merchant data

An application supplies the transport itself. It sends each request through
`encode_frame`, passes the received bytes to `FrameDecoder`, and hands events
to `EventDispatcher`.

## Tests

```
pip install -e .[test]
pytest
```