from __future__ import annotations

from dataclasses import dataclass

from PIL import Image, ImageDraw, ImageFont

from .models import DisplayState


@dataclass(frozen=True)
class RenderConfig:
    width: int = 128
    height: int = 64

    # horizontal gauges, zero in the middle
    bar_x0: int = 4
    bar_h: int = 6

    invert: bool = False


def _font() -> ImageFont.ImageFont:
    return ImageFont.load_default()


def _ratio(value: float, limit: float) -> float:
    if limit <= 0:
        return 0.0
    return max(-1.0, min(1.0, value / limit))


def _bar(draw, cfg: RenderConfig, y: int, ratio: float, fg: int) -> None:
    x0 = cfg.bar_x0
    x1 = cfg.width - cfg.bar_x0 - 1
    mid = (x0 + x1) // 2
    draw.rectangle([x0, y, x1, y + cfg.bar_h], outline=fg)
    draw.line([(mid, y - 1), (mid, y + cfg.bar_h + 1)], fill=fg)

    end = mid + int(ratio * (x1 - mid))
    if end != mid:
        draw.rectangle([min(mid, end), y + 1, max(mid, end), y + cfg.bar_h - 1], fill=fg)


def render(state: DisplayState, cfg: RenderConfig = RenderConfig()) -> Image.Image:
    bg = 0 if not cfg.invert else 1
    fg = 1 if not cfg.invert else 0

    img = Image.new("1", (cfg.width, cfg.height), bg)
    draw = ImageDraw.Draw(img)
    font = _font()

    if state.message:
        y = 8
        for line in [s for s in state.message.split("\n") if s][:4]:
            draw.text((2, y), line[:21], font=font, fill=fg)
            y += 12
        return img

    draw.text((2, 0), f"SPD {state.speed:+.2f}/{state.speed_limit:.2f}", font=font, fill=fg)
    _bar(draw, cfg, 12, _ratio(state.speed, state.speed_limit), fg)

    draw.text((2, 22), f"ANG {state.angle:+.1f}/{state.angle_limit:.1f}", font=font, fill=fg)
    # positive angle is left, so draw it on the left half
    _bar(draw, cfg, 34, -_ratio(state.angle, state.angle_limit), fg)

    key_txt = repr(state.last_key) if state.last_key is not None else "--"
    draw.text((2, 50), f"KEY {key_txt}", font=font, fill=fg)

    return img
