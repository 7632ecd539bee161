"""Color darkening pipeline - pure functions, no UI dependencies.

parse -> relative chroma -> hue floor -> darker lightness -> chroma at the
new lightness -> chroma ceiling -> serialize.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from darkshade import defaults
from darkshade.colorspace import (
    format_color,
    is_out_of_gamut,
    max_chroma,
    parse_color,
    relative_chroma,
)
from darkshade.types import (
    Color,
    DarkshadeError,
    OutputFormat,
    TransformDiagnostics,
    normalize_hue,
)

logger = logging.getLogger(__name__)

DiagnosticHook = Callable[[TransformDiagnostics], None]


@dataclass(frozen=True)
class DarkenResult:
    """Result of darkening one parsed color."""

    color: Color
    base_relative_chroma: float
    relative_chroma: float
    lightness: float  # Remapped lightness, negative for L < 0.65
    unclamped_chroma: float  # Chroma before the artistic ceiling
    in_gamut: bool


def apply_hue_floor(
    rel_chroma: float,
    hue: float,
    is_achromatic: bool,
    floor: float = defaults.HUE_FLOOR_RELATIVE_CHROMA,
) -> float:
    """Keep yellow-through-cyan hues from washing out.

    Hues in (30, 210] get at least *floor* relative chroma. Achromatic
    colors always get 0 so a gray never picks up a tint.
    """
    if is_achromatic:
        return 0.0

    hue = normalize_hue(hue)
    if defaults.HUE_FLOOR_LOW < hue <= defaults.HUE_FLOOR_HIGH:
        return max(floor, rel_chroma)
    return rel_chroma


def darken_lightness(L: float) -> float:
    """Map lightness to a darker one: min(2L - 1.3, 0.5).

    Goes negative for L < 0.65; callers decide what to do with that.
    """
    return min(defaults.LIGHTNESS_SLOPE * L - defaults.LIGHTNESS_OFFSET, defaults.LIGHTNESS_CAP)


def darken_color(color: Color, use_relative_chroma: bool = True) -> DarkenResult:
    """Compute the darkened variant of an already parsed color.

    Args:
        color: Input color
        use_relative_chroma: True keeps the color's saturation proportion at
            the new lightness (never dropping below the input chroma);
            False only clips chroma to the new gamut boundary

    Returns:
        DarkenResult with the output color and the intermediate values
    """
    L, C, H = color.as_tuple()
    achromatic = color.is_achromatic

    base_rel = relative_chroma(L, C, H)
    rel = apply_hue_floor(base_rel, H, achromatic)
    logger.debug("relative chroma: %s, base relative chroma: %s", rel, base_rel)

    new_L = darken_lightness(L)
    # L' < 0 is kept; the boundary search then finds no chroma there

    if achromatic:
        new_C = 0.0
    elif use_relative_chroma:
        new_C = max(max_chroma(new_L, H) * rel, C)
    else:
        new_C = min(C, max_chroma(new_L, H))

    out = Color(new_L, min(new_C, defaults.CHROMA_CEILING), H)
    in_gamut = not is_out_of_gamut(out)
    if not in_gamut:
        logger.debug("Darkened color %s is outside sRGB and will be clipped", out)

    return DarkenResult(
        color=out,
        base_relative_chroma=base_rel,
        relative_chroma=rel,
        lightness=new_L,
        unclamped_chroma=new_C,
        in_gamut=in_gamut,
    )


def _emit(hook: Optional[DiagnosticHook], diagnostics: TransformDiagnostics) -> None:
    if hook is None:
        return
    try:
        hook(diagnostics)
    except Exception:
        logger.exception("Diagnostic hook raised; ignoring")


def transform(
    input_color: str,
    output_format: "OutputFormat | str" = defaults.DEFAULT_OUTPUT_FORMAT,
    use_relative_chroma: bool = True,
    on_diagnostic: Optional[DiagnosticHook] = None,
) -> str:
    """Darken a color given as text and return it as text.

    Never raises: unparseable input or an unknown output format yields
    ``"Invalid color"``.

    Args:
        input_color: Any color syntax parse_color() accepts
        output_format: OutputFormat or one of "hex", "rgb", "oklch"
        use_relative_chroma: See darken_color()
        on_diagnostic: Optional callable receiving a TransformDiagnostics
            for this call; it cannot affect the result

    Returns:
        The darkened color, or the invalid-color sentinel
    """
    fmt_name = getattr(output_format, "value", str(output_format))
    info: dict = {}
    try:
        color = parse_color(input_color)
        info["input_color"] = color
        result = darken_color(color, use_relative_chroma)
        info.update(
            base_relative_chroma=result.base_relative_chroma,
            relative_chroma=result.relative_chroma,
            lightness=result.lightness,
            unclamped_chroma=result.unclamped_chroma,
            output_color=result.color,
            output_in_gamut=result.in_gamut,
        )
        text = format_color(result.color, output_format)
        error = None
    except DarkshadeError as exc:
        logger.warning("Error processing color %r: %s", input_color, exc)
        text, error = defaults.INVALID_COLOR, str(exc)
    except Exception as exc:
        logger.exception("Unexpected error processing color %r", input_color)
        text, error = defaults.INVALID_COLOR, f"{type(exc).__name__}: {exc}"

    _emit(on_diagnostic, TransformDiagnostics(
        input_text=str(input_color),
        output_format=fmt_name,
        use_relative_chroma=bool(use_relative_chroma),
        result=text,
        error=error,
        **info,
    ))
    return text
