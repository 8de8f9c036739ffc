from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ObjectFileSinkRuntimeConfig:
    """Configuration for the object file sink.

    Paths come from each OutputRecord; the sink only decides how the target
    file is prepared.
    """
    create_parents: bool = False        # mkdir -p the target's directory before writing
