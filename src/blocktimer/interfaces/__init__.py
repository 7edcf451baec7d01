"""All user-facing timing interfaces."""
from .decorators import timer, timed, time_block
