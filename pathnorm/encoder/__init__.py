# flake8: noqa:F401
from .encoder import PathEncoder
from .svgencoder import SvgPathEncoder
