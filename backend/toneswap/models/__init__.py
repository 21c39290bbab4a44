from toneswap.models.base import Base
from toneswap.models.transformation import Transformation
