import newton_gregory.interpolation # registers the interpolants
from newton_gregory.registry import interpolator
from newton_gregory.session import InterpolationSession, ValidationError
