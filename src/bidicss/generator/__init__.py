from bidicss.generator.aliases import float_alias, side_alias, text_align_alias
from bidicss.generator.generator import (
    GeneratedStylesheet,
    generate,
    generate_all,
    unknown_tokens,
)

__all__ = [
    "GeneratedStylesheet",
    "generate",
    "generate_all",
    "unknown_tokens",
    "float_alias",
    "text_align_alias",
    "side_alias",
]
