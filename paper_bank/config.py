import json
from dataclasses import dataclass, fields
from typing import Optional, Tuple


@dataclass(frozen=True)
class SecondaryScript:
    """Unicode block + option labels of the second language on the paper."""
    name: str
    range_start: int
    range_end: int               # inclusive
    labels: Tuple[str, ...]      # stand-ins for A, B, C, D in that script

    def contains(self, ch: str) -> bool:
        return self.range_start <= ord(ch) <= self.range_end


TAMIL = SecondaryScript(
    name="tamil",
    range_start=0x0B80,
    range_end=0x0BFF,
    labels=("அ", "ஆ", "இ", "ஈ"),
)

DEFAULT_ANSWER_CUES = ("correct answer", "answer", "ans", "விடை")


@dataclass(frozen=True)
class ParserConfig:
    labels: str = "ABCD"
    min_block_length: int = 10
    min_question_length: int = 10
    fallback_line_length: int = 20
    min_option_length: int = 3
    min_secondary_question_length: int = 5
    secondary: Optional[SecondaryScript] = TAMIL
    answer_cues: Tuple[str, ...] = DEFAULT_ANSWER_CUES


DEFAULT_CONFIG = ParserConfig()


# -------------------------------------------------
# JSON loading
# -------------------------------------------------
def _code_point(value) -> int:
    # "0x0B80" and 2944 are both accepted
    if isinstance(value, str):
        return int(value, 0)
    return int(value)


def _secondary_from_json(raw: Optional[dict]) -> Optional[SecondaryScript]:
    if raw is None:
        return None

    unknown = set(raw) - {f.name for f in fields(SecondaryScript)}
    if unknown:
        raise ValueError(f"Unknown secondary script keys: {sorted(unknown)}")

    return SecondaryScript(
        name=raw["name"],
        range_start=_code_point(raw["range_start"]),
        range_end=_code_point(raw["range_end"]),
        labels=tuple(raw["labels"]),
    )


def parser_config_from_dict(raw: dict) -> ParserConfig:
    known = {f.name for f in fields(ParserConfig)}
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"Unknown parser config keys: {sorted(unknown)}")

    kwargs = dict(raw)
    if "secondary" in kwargs:
        kwargs["secondary"] = _secondary_from_json(kwargs["secondary"])
    if "answer_cues" in kwargs:
        kwargs["answer_cues"] = tuple(kwargs["answer_cues"])
    return ParserConfig(**kwargs)


def load_parser_config(path: str) -> ParserConfig:
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    return parser_config_from_dict(raw)
