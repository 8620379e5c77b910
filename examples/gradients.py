"""Render example gradients to PNG files.

Each image holds the gradient strip on top and a plot of its red, green and
blue channels underneath.

Run directly with:
    python examples/gradients.py [output_dir]
"""
import os
import sys

import numpy as np
from PIL import Image, ImageDraw

from chromagrad import BlendMode, Gradient, Interpolation, build_gradient

WIDTH = 1000
STRIP_HEIGHT = 70
PLOT_HEIGHT = 150
PADDING = 10


def render(gradient: Gradient) -> Image.Image:
    dmin, dmax = gradient.domain()
    strip = gradient.to_rgba8_array(WIDTH)

    canvas = Image.new("RGBA", (WIDTH + 2 * PADDING, STRIP_HEIGHT + PLOT_HEIGHT + 3 * PADDING),
                       (255, 255, 255, 255))
    band = Image.fromarray(np.repeat(strip[np.newaxis, :, :], STRIP_HEIGHT, axis=0), "RGBA")
    canvas.paste(band, (PADDING, PADDING))

    # Channel plot, unclamped so spline overshoot stays visible
    top = STRIP_HEIGHT + 2 * PADDING
    draw = ImageDraw.Draw(canvas)
    draw.rectangle((PADDING, top, PADDING + WIDTH, top + PLOT_HEIGHT), outline=(200, 200, 200, 255))
    ts = np.linspace(dmin, dmax, WIDTH)
    channels = np.array([gradient.at(t).to_tuple()[:3] for t in ts])
    ys = top + (1.0 - np.clip(channels, -0.1, 1.1)) * PLOT_HEIGHT
    for k, line_color in enumerate([(255, 0, 0, 255), (0, 160, 0, 255), (0, 0, 255, 255)]):
        points = [(PADDING + x, float(y)) for x, y in enumerate(ys[:, k])]
        draw.line(points, fill=line_color, width=2)
    return canvas


def custom_gradients():
    yield "custom-default", build_gradient()
    yield "custom-html", build_gradient(html_colors=["deeppink", "gold", "seagreen"])
    yield "custom-hard-step", build_gradient(
        html_colors=["#fff", "#00f", "#f00", "#fe0"],
        positions=[0.0, 0.7, 0.7, 1.0],
    )
    yield "custom-domain", build_gradient(
        html_colors=["#C41189", "#00BFFF", "#FFD700"],
        positions=[-20.0, 120.0],
    )


def blend_mode_gradients():
    colors = ["#333", "#ff0", "#4e9", "#f0f"]
    for mode in BlendMode:
        yield f"blend-{mode.value}", build_gradient(html_colors=colors, blend_mode=mode)


def interpolation_gradients():
    colors = ["#C41189", "#00BFFF", "#FFD700", "#111"]
    for interpolation in Interpolation:
        yield f"interpolation-{interpolation.value}", build_gradient(
            html_colors=colors,
            blend_mode=BlendMode.OKLAB,
            interpolation=interpolation,
        )


def sharp_gradients():
    base = build_gradient(html_colors=["#C41189", "#00BFFF", "#FFD700"],
                          interpolation=Interpolation.CATMULL_ROM)
    for smoothness in (0.0, 0.3, 1.0):
        yield f"sharp-{smoothness:.1f}", base.sharp(7, smoothness)


def main(output_dir: str = "example_output") -> None:
    os.makedirs(output_dir, exist_ok=True)
    for group in (custom_gradients, blend_mode_gradients, interpolation_gradients, sharp_gradients):
        for name, gradient in group():
            path = os.path.join(output_dir, f"{name}.png")
            render(gradient).save(path)
            print(f"{path}: {gradient!r}")


if __name__ == "__main__":
    main(*sys.argv[1:2])
