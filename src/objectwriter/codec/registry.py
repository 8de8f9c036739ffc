from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, List, Optional, Type

from objectwriter.codec.base import ValueCodec


class CodecRegistryError(RuntimeError):
    pass


class CodecRegistry:
    _by_tag: ClassVar[Dict[int, Type[ValueCodec]]] = {}
    _by_type: ClassVar[Dict[type, List[Type[ValueCodec]]]] = {}

    @classmethod
    def register(
        cls,
        *,
        codec_class: Type[ValueCodec],
        overwrite: bool = False,
    ) -> None:
        tag = codec_class.tag
        if not 0 <= tag <= 0xFF:
            raise CodecRegistryError(f"Codec tag must fit in one byte, got {tag!r}")
        existing = cls._by_tag.get(tag)
        if existing is not None:
            if not overwrite:
                raise CodecRegistryError(
                    f"Codec already registered for tag=0x{tag:02x}: {existing}"
                )
            for codecs in cls._by_type.values():
                if existing in codecs:
                    codecs.remove(existing)
        cls._by_tag[tag] = codec_class
        for python_type in codec_class.python_types:
            cls._by_type.setdefault(python_type, []).append(codec_class)

    @classmethod
    def get(cls, tag: int) -> Type[ValueCodec]:
        try:
            return cls._by_tag[tag]
        except KeyError as exc:
            raise CodecRegistryError(f"No codec registered for tag=0x{tag:02x}") from exc

    @classmethod
    def try_get(cls, tag: int) -> Optional[Type[ValueCodec]]:
        return cls._by_tag.get(tag)

    @classmethod
    def for_value(cls, value: Any) -> Type[ValueCodec]:
        """Pick the first registered codec that accepts ``value``.

        Types are matched along the value's MRO, so ``bool`` resolves before
        ``int``.
        """
        for klass in type(value).__mro__:
            for codec_class in cls._by_type.get(klass, ()):
                if codec_class().accepts(value):
                    return codec_class
        raise CodecRegistryError(f"No codec accepts value of type {type(value).__name__}")

    @classmethod
    def clear(cls) -> None:
        cls._by_tag.clear()
        cls._by_type.clear()


def register_codec(
    *,
    overwrite: bool = False,
) -> Callable[[Type[ValueCodec]], Type[ValueCodec]]:
    def decorator(codec_class: Type[ValueCodec]) -> Type[ValueCodec]:
        CodecRegistry.register(codec_class=codec_class, overwrite=overwrite)
        return codec_class

    return decorator
