"""3D transform owned by the embedding environment.

Only the parts the reconciler touches are modelled: a translation and a
rotation. Instances are immutable; edits produce new transforms.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from scipy.spatial.transform import Rotation


@dataclass(frozen=True, eq=False)
class Transform:
    """Translation plus rotation of one entity."""

    translation: tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotation: Rotation = field(default_factory=Rotation.identity)

    def with_rotation(self, rotation: Rotation) -> Transform:
        return replace(self, rotation=rotation)

    def with_translation_xy(self, x: float, y: float) -> Transform:
        """Replace x and y of the translation; z is kept as-is."""
        return replace(self, translation=(x, y, self.translation[2]))
