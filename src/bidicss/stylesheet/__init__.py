from bidicss.stylesheet.parser import parse_source
from bidicss.stylesheet.model import StylesheetSource, Text, TokenContext, TokenRef

__all__ = ["parse_source", "StylesheetSource", "Text", "TokenContext", "TokenRef"]
