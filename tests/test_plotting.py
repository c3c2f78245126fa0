"""Tests for the matplotlib step plot."""

import matplotlib.pyplot as plt
import numpy as np

from intensitylist.plotting import plot_intensity, step_coordinates


def test_step_coordinates_pads_with_zero():
    x, y = step_coordinates([(10, 1), (30, 0)], margin=0.1)
    np.testing.assert_allclose(x, [8.0, 10.0, 30.0, 32.0])
    np.testing.assert_allclose(y, [0.0, 1.0, 0.0, 0.0])


def test_step_coordinates_empty():
    x, y = step_coordinates([])
    np.testing.assert_allclose(y, [0.0, 0.0])
    assert x.size == 2


def test_plot_into_given_axes(stepped):
    fig, ax = plt.subplots()
    returned = plot_intensity(stepped, ax=ax, title="Load")
    assert returned is ax
    assert ax.get_title() == "Load"
    assert len(ax.get_lines()) >= 1
    plt.close(fig)


def test_plot_creates_figure(stepped):
    ax = stepped.plot()
    assert ax.get_xlabel() == "Position"
    assert ax.get_ylabel() == "Intensity"
    plt.close(ax.figure)
