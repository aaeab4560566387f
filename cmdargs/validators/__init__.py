__all__ = [
    "Choice",
    "Number",
]

from cmdargs.validators._choice import Choice
from cmdargs.validators._number import Number
