from chipdna.cardhash import CardHash, parse_card_hashes

SAMPLE = """<?xml version="1.0" encoding="utf-8"?>
<ArrayOfCardHash>
  <CardHash>
    <Source>SourceA</Source>
    <Scope>ScopeA</Scope>
    <Value>hash-value-one</Value>
  </CardHash>
  <CardHash>
    <Source>SourceB</Source>
    <Scope>ScopeB</Scope>
    <Value>hash-value-two</Value>
  </CardHash>
</ArrayOfCardHash>"""


def test_parse_sample_in_order():
    hashes = parse_card_hashes(SAMPLE)
    assert hashes == [
        CardHash(scope="ScopeA", source="SourceA", value="hash-value-one"),
        CardHash(scope="ScopeB", source="SourceB", value="hash-value-two"),
    ]


def test_str_format():
    card_hash = CardHash(scope="ScopeA", source="SourceA", value="hash-value-one")
    assert str(card_hash) == "Source: SourceA Scope:ScopeA Value: hash-value-one"


def test_missing_children_give_empty_strings():
    xml = "<ArrayOfCardHash><CardHash><Value>only</Value></CardHash></ArrayOfCardHash>"
    assert parse_card_hashes(xml) == [CardHash(scope="", source="", value="only")]


def test_other_elements_are_ignored():
    xml = (
        "<ArrayOfCardHash><Other/><CardHash><Source>s</Source><Scope>c</Scope>"
        "<Value>v</Value></CardHash></ArrayOfCardHash>"
    )
    assert parse_card_hashes(xml) == [CardHash(scope="c", source="s", value="v")]


def test_namespaced_document():
    xml = (
        '<ArrayOfCardHash xmlns="urn:example"><CardHash><Source>s</Source>'
        "<Scope>c</Scope><Value>v</Value></CardHash></ArrayOfCardHash>"
    )
    assert parse_card_hashes(xml) == [CardHash(scope="c", source="s", value="v")]


def test_empty_array():
    assert parse_card_hashes("<ArrayOfCardHash/>") == []


def test_empty_or_malformed_input():
    assert parse_card_hashes("") == []
    assert parse_card_hashes("<ArrayOfCardHash><CardHash>") == []


def test_wrong_root_gives_nothing():
    xml = "<Something><CardHash><Value>v</Value></CardHash></Something>"
    assert parse_card_hashes(xml) == []