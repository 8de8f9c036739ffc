import pytest

from objectwriter.bootstrap import load_builtin_codecs
from objectwriter.codec.base import ValueCodec
from objectwriter.codec.registry import (
    CodecRegistry,
    CodecRegistryError,
    register_codec,
)


def _codec(tag_value, types=()):
    class Dummy(ValueCodec):
        tag = tag_value
        name = f"dummy{tag_value}"
        python_types = types

        def encode(self, value):
            return b""

        def decode(self, stream):
            return None

    return Dummy


def setup_function() -> None:
    CodecRegistry.clear()


def teardown_function() -> None:
    load_builtin_codecs(reload=True)


def test_register_and_get_round_trip():
    Dummy = _codec(0x40)

    CodecRegistry.register(codec_class=Dummy)

    assert CodecRegistry.get(0x40) is Dummy
    assert CodecRegistry.try_get(0x40) is Dummy


def test_get_missing_raises_helpful_error():
    with pytest.raises(CodecRegistryError, match="No codec registered"):
        CodecRegistry.get(0x40)
    assert CodecRegistry.try_get(0x40) is None


def test_duplicate_registration_raises_by_default():
    CodecRegistry.register(codec_class=_codec(0x40))

    with pytest.raises(CodecRegistryError, match="already registered"):
        CodecRegistry.register(codec_class=_codec(0x40))


def test_overwrite_replaces_codec_for_tag_and_type():
    first = _codec(0x40, (complex,))
    second = _codec(0x40, (complex,))
    CodecRegistry.register(codec_class=first)
    CodecRegistry.register(codec_class=second, overwrite=True)

    assert CodecRegistry.get(0x40) is second
    assert CodecRegistry.for_value(1j) is second


def test_tag_must_fit_in_one_byte():
    with pytest.raises(CodecRegistryError, match="one byte"):
        CodecRegistry.register(codec_class=_codec(0x100))


def test_register_codec_decorator_registers_class():
    @register_codec()
    class Dummy(ValueCodec):
        tag = 0x41
        name = "dummy"
        python_types = (complex,)

        def encode(self, value):
            return b""

        def decode(self, stream):
            return None

    assert CodecRegistry.get(0x41) is Dummy
    assert CodecRegistry.for_value(2j) is Dummy


def test_for_value_without_codec_raises():
    with pytest.raises(CodecRegistryError, match="No codec accepts"):
        CodecRegistry.for_value(object())


def test_reload_restores_builtin_codecs():
    load_builtin_codecs(reload=True)

    assert CodecRegistry.get(0x02).name == "int32"
    assert CodecRegistry.get(0x07).name == "timestamp"
