"""Container types: Option, Result and the Variant protocol."""

from patmatch.types.option import Nothing, NothingType, Option, Some, to_option
from patmatch.types.result import Err, Ok, Result
from patmatch.types.variant import Variant, is_variant

__all__ = [
    "Err",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Result",
    "Some",
    "Variant",
    "is_variant",
    "to_option",
]
