from __future__ import annotations

"""Variant registry and metadata.

Maps a tactic id to its practice variant (generator, evaluator, presets)
so the engine resolves the strategy once per session instead of branching
on ids.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from ..engine.models import DIFFICULTY_ORDER, Difficulty, SessionConfig
from ..variants.base_variant import BaseVariant
from ..variants.chunking import ChunkingVariant
from ..variants.dominic_system import DominicSystemVariant
from ..variants.face_name import FaceNameVariant
from ..variants.linking import LinkingVariant
from ..variants.major_system import MajorSystemVariant
from ..variants.memory_palace import MemoryPalaceVariant
from ..variants.pao_system import PaoSystemVariant
from ..variants.peg_system import PegSystemVariant
from . import presets as P


class VariantNotFoundError(KeyError):
    """No practice game exists for the requested tactic id."""


@dataclass(frozen=True)
class VariantMeta:
    id: str
    name: str
    description: str
    reveal: str
    study_table: bool
    presets: Dict[str, Dict[str, Any]]


_VARIANTS: Dict[str, BaseVariant] = {}


def _build() -> Dict[str, BaseVariant]:
    variants: List[BaseVariant] = [
        LinkingVariant(P.LINKING_PRESETS),
        MemoryPalaceVariant(P.MEMORY_PALACE_PRESETS),
        PegSystemVariant(P.PEG_SYSTEM_PRESETS),
        ChunkingVariant(P.CHUNKING_PRESETS),
        FaceNameVariant(P.FACE_NAME_PRESETS),
        MajorSystemVariant(P.MAJOR_SYSTEM_PRESETS),
        PaoSystemVariant(P.PAO_SYSTEM_PRESETS),
        DominicSystemVariant(P.DOMINIC_SYSTEM_PRESETS),
    ]
    return {v.id: v for v in variants}


def _table() -> Dict[str, BaseVariant]:
    if not _VARIANTS:
        _VARIANTS.update(_build())
    return _VARIANTS


def list_variants() -> List[VariantMeta]:
    return [_meta(v) for v in _table().values()]


def has_variant(variant_id: str) -> bool:
    return variant_id in _table()


def get_variant(variant_id: str) -> BaseVariant:
    try:
        return _table()[variant_id]
    except KeyError:
        raise VariantNotFoundError(f"Unknown variant id: {variant_id}") from None


def make_session_config(variant_id: str, difficulty: Difficulty | str) -> SessionConfig:
    """Resolve presets for a variant and difficulty into a SessionConfig."""
    return get_variant(variant_id).session_config(difficulty)


def _meta(v: BaseVariant) -> VariantMeta:
    return VariantMeta(
        id=v.id,
        name=v.name,
        description=v.description,
        reveal=v.reveal.value,
        study_table=v.study_table,
        presets={d.value: dict(v.presets[d]) for d in DIFFICULTY_ORDER},
    )
