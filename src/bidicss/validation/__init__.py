from bidicss.validation.rules import ALL_RULES
from bidicss.validation.validator import check_source

__all__ = ["ALL_RULES", "check_source"]
