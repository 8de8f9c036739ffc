from __future__ import annotations

import importlib
import sys
from typing import Iterable


BUILTIN_CODEC_MODULES: tuple[str, ...] = (
    "objectwriter.codec.primitives",
    "objectwriter.codec.text",
    "objectwriter.codec.temporal",
)


_LOADED = False


def load_builtin_codecs(*, reload: bool = False, modules: Iterable[str] = BUILTIN_CODEC_MODULES) -> None:
    """Import built-in codec modules so their decorators register them.

    In production, call with reload=False (default) so imports are cheap.
    In tests, call with reload=True after clearing the registry to re-run decorators.
    """

    global _LOADED

    if _LOADED and not reload:
        return

    if reload:
        from objectwriter.codec.registry import CodecRegistry

        CodecRegistry.clear()

    for module_name in modules:
        if reload:
            sys.modules.pop(module_name, None)
        importlib.import_module(module_name)

    _LOADED = True
