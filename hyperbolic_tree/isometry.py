"""Möbius isometries of the Poincaré disk."""

from __future__ import annotations

from dataclasses import dataclass

from .disk import ZERO, DiskPoint

_ONE = DiskPoint(1.0, 0.0)


@dataclass(frozen=True)
class Isometry:
    """Isometry ``z -> (z*rotation + translation) / (conj(translation)*z*rotation + 1)``."""

    translation: DiskPoint
    rotation: DiskPoint

    @classmethod
    def identity(cls) -> "Isometry":
        return cls(translation=ZERO, rotation=_ONE)

    @classmethod
    def from_translation(cls, t: DiskPoint) -> "Isometry":
        return cls(translation=t, rotation=_ONE)

    @classmethod
    def compose(cls, first: DiskPoint, second: DiskPoint) -> "Isometry":
        """Compose two translations into a single isometry.

        Applying the result to ``z`` matches ``z.translate(first).translate(second)``.
        """

        d = second.conjugate * first + 1.0
        r = first.conjugate * second + 1.0
        return cls(translation=(first + second) / d, rotation=r / d)

    def transform(self, z: DiskPoint) -> DiskPoint:
        zz = z * self.rotation + self.translation
        d = self.translation.conjugate * z * self.rotation + 1.0
        return zz / d

    __call__ = transform

    def __str__(self) -> str:
        return f"<Isometry T={self.translation} R={self.rotation}>"


__all__ = ["Isometry"]
