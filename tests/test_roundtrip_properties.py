"""Property-based tests: serialize() output always decodes to the same record."""

from hypothesis import given, settings
from hypothesis import strategies as st

from incrusta import DataURI, Encoding, MediaType, decode, serialize
from incrusta.charsets import TOKEN_CHARS

tokens = st.text(alphabet=sorted(TOKEN_CHARS), min_size=1, max_size=12)
values = st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=20)

records = st.builds(
    DataURI,
    media_type=st.builds(
        MediaType,
        type=tokens,
        subtype=tokens,
        params=st.dictionaries(tokens, values, max_size=4),
    ),
    encoding=st.sampled_from(list(Encoding)),
    data=st.binary(max_size=64),
)


class TestSerializeDecode:
    """Decoding canonical text reproduces the record."""

    @given(records)
    @settings(max_examples=300)
    def test_round_trip(self, record: DataURI) -> None:
        assert decode(serialize(record)) == record

    @given(records)
    @settings(max_examples=100)
    def test_canonical_text_is_stable(self, record: DataURI) -> None:
        text = serialize(record)
        assert serialize(decode(text)) == text

    @given(records)
    @settings(max_examples=100)
    def test_output_is_ascii(self, record: DataURI) -> None:
        assert serialize(record).isascii()
