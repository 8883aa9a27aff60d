import logging
import numbers
from typing import Iterable, List, Optional, Tuple, Union

import matplotlib.animation as animation
import matplotlib.pyplot as plt
import numpy as np

from argand.complex import Complex

logger = logging.getLogger(__name__)

ComplexLike = Union[Complex, complex, Tuple[float, float]]


def as_complex(value: ComplexLike) -> Complex:
    """Convert a `Complex`, Python `complex`, real number or (x, y) pair."""
    if isinstance(value, Complex):
        return value
    if isinstance(value, complex):
        return Complex.from_rectangular(value.real, value.imag)
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return Complex.from_rectangular(value, 0)
    if isinstance(value, tuple) and len(value) == 2:
        return Complex.from_rectangular(*value)
    raise TypeError(f"cannot interpret {type(value).__name__} as a complex number")


def _components(seq: List[Complex]) -> Tuple[np.ndarray, np.ndarray, float]:
    """Real parts, imaginary parts and a half-width that fits everything."""
    xs = np.array([z.re for z in seq])
    ys = np.array([z.im for z in seq])
    span = max(np.abs(xs).max(), np.abs(ys).max(), 1.0)
    return xs, ys, float(span)


def _prepare(sequence: Iterable[ComplexLike]) -> List[Complex]:
    seq = [as_complex(z) for z in sequence]
    if not seq:
        raise ValueError("need at least one value to draw")
    return seq


def _setup_axes(ax, span: float, title: str) -> None:
    margin = 0.1 * span
    ax.set_aspect("equal")
    ax.set_xlim(-span - margin, span + margin)
    ax.set_ylim(-span - margin, span + margin)
    ax.set_xlabel("Re")
    ax.set_ylabel("Im")
    ax.set_title(title)
    ax.grid(True, linestyle="--", alpha=0.3)


def plot_complex(
    sequence: Iterable[ComplexLike],
    *,
    ax: Optional[plt.Axes] = None,
    trail: bool = True,
) -> plt.Axes:
    """
    Plot complex-number samples on the Argand plane.

    Parameters
    ----------
    sequence : iterable of `Complex`, Python `complex`, or (x,y) tuples
    ax       : axes to draw on; a new figure is created when omitted
    trail    : join consecutive samples with a line

    Returns
    -------
    The matplotlib Axes drawn on.
    """
    seq = _prepare(sequence)
    xs, ys, span = _components(seq)
    logger.debug("Plotting %d samples, span %g", len(seq), span)

    if ax is None:
        _, ax = plt.subplots()
    _setup_axes(ax, span, "Complex numbers")

    if trail:
        ax.plot(xs, ys, "b-", alpha=0.5, linewidth=1)
    ax.plot(xs, ys, "ro", markersize=6)
    return ax


def animate_complex(
    sequence: Iterable[ComplexLike],
    *,
    interval: int = 200,
    show: bool = True,
) -> animation.FuncAnimation:
    """
    Animate a sequence of complex‑number samples in the 2‑D plane.

    Parameters
    ----------
    sequence : iterable of `Complex`, Python `complex`, or (x,y) tuples
    interval : delay between frames in **ms**
    show     : call ``plt.show()`` before returning

    Returns
    -------
    matplotlib.animation.FuncAnimation – handy if you need to save().
    """
    # Concrete list needed to pre-fit axes
    seq = _prepare(sequence)
    xs, ys, span = _components(seq)
    logger.debug("Animating %d frames at %d ms, span %g", len(seq), interval, span)

    fig, ax = plt.subplots()
    _setup_axes(ax, span, "Complex number animation")

    point, = ax.plot([], [], "ro", markersize=6)
    path, = ax.plot([], [], "b-", alpha=0.5, linewidth=1)

    def init():
        point.set_data([], [])
        path.set_data([], [])
        return point, path

    def update(frame: int):
        z = seq[frame]
        point.set_data([z.re], [z.im])
        path.set_data(xs[:frame + 1], ys[:frame + 1])
        ax.set_title(f"t = {frame}  |  z = {z.re:+.3f} {z.im:+.3f}i")
        return point, path

    anim = animation.FuncAnimation(
        fig,
        update,
        frames=len(seq),
        init_func=init,
        interval=interval,
        blit=True,
        repeat=False,
    )
    if show:
        plt.show()
    return anim


if __name__ == "__main__":
    o = [Complex.from_angle(0)]
    step = Complex.from_angle(np.pi / 180)
    for _ in range(1, 360):
        o.append(o[-1] * step)
    animate_complex(o, interval=1)
