"""Sample language descriptors used by the default config."""

from dataclasses import dataclass, field


@dataclass
class Language:
    name: str
    extensions: tuple[str, ...] = field(default_factory=tuple)
    line_comment: str = "#"


def python() -> Language:
    return Language(name="python", extensions=(".py",), line_comment="#")


def javascript() -> Language:
    return Language(name="javascript", extensions=(".js", ".mjs"), line_comment="//")
