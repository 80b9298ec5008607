"""Options controlling how a GPA is computed."""

import dataclasses

from ..scales import ScaleRegistry, GradingScale, FOUR_POINT_SCALE


@dataclasses.dataclass(frozen=True)
class GPAOptions:
    """Configures how GPAs are calculated by a :class:`Transcript`.

    Attributes
    ----------
    weighted : bool
        If `True`, each course's quality points are weighted by its credit
        hours. If `False`, every graded course counts equally. Default: `True`.
    scale : str
        The name of the grading scale to use, looked up in a
        :class:`gpalib.scales.ScaleRegistry`. Default: "4.0 Scale".

    """

    weighted: bool = True
    scale: str = FOUR_POINT_SCALE.name

    def resolve_scale(self, registry: ScaleRegistry) -> GradingScale:
        """Look up the configured scale in a registry.

        Raises
        ------
        KeyError
            If the registry has no scale with the configured name.

        """
        return registry[self.scale]
