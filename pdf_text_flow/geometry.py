"""
Plain geometry value types.

Coordinates follow PDF conventions: y grows upward, so moving down a page
subtracts from y.
"""

# Standard Library
import dataclasses


@dataclasses.dataclass(frozen=True)
class Point:
	x: float
	y: float

	def plus(self, other: "Point") -> "Point":
		return Point(self.x + other.x, self.y + other.y)


@dataclasses.dataclass(frozen=True)
class Size:
	width: float
	height: float


@dataclasses.dataclass(frozen=True)
class Padding:
	top: float
	right: float
	bottom: float
	left: float

	@staticmethod
	def zero() -> "Padding":
		return Padding(0.0, 0.0, 0.0, 0.0)
