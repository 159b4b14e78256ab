import pytest

from coreplot import core_plot
from coreplot.errors import InvalidArgument, InvalidColor, TooManyColors
from coreplot.models import RgbColors, ViewAngle


def test_default_sediment_core():
    plot = core_plot([3, 8, 6, 4, 2, 5])
    assert plot.n_layers == 6
    assert [layer.color_hex for layer in plot.layers] == \
        ['#6e7f80', '#c0c0c0'] * 3
    assert [layer.index for layer in plot.legend_layers] == [0, 1]
    assert plot.zlim == (0, 28)
    assert plot.xlim == plot.ylim == (-0.5, 0.5)
    assert plot.view_angle is ViewAngle.OBLIQUE


def test_depth_core_with_rgb_colors():
    plot = core_plot([0, 12, 46, 100], radius=5,
                     colors=[[225, 169, 95], [51, 0, 0], [152, 129, 123]],
                     z_data_type='depth')
    assert [layer.thickness for layer in plot.layers] == [12, 34, 54]
    assert plot.z_offset == 0
    assert [layer.color_hex for layer in plot.layers] == \
        ['#e1a95f', '#330000', '#98817b']
    assert all(layer.legend_visible for layer in plot.layers)
    assert isinstance(plot.color_spec, RgbColors)
    assert plot.radius == 5.0


def test_repeated_hex_colors():
    plot = core_plot([3, 8, 6, 4, 2, 5],
                     colors=['#fea12c', '#b147ce', '#20d962'], radius=2)
    assert [layer.color_hex for layer in plot.layers] == \
        ['#fea12c', '#b147ce', '#20d962'] * 2
    assert [layer.name for layer in plot.legend_layers] == \
        ['layer_00', 'layer_01', 'layer_02']


def test_depth_offset_places_layers():
    plot = core_plot([100, 102, 110], z_data_type='depth')
    assert [(layer.z_top, layer.z_bottom) for layer in plot.layers] == \
        [(100, 102), (102, 110)]
    assert plot.zlim == (100, 110)
    assert plot.layers[1].mesh.vertices[:, 2].max() == 110


def test_style_is_passed_through():
    plot = core_plot([1, 2], edge_lines=True, light=False, face_alpha=0.5,
                     edge_alpha=0.25, edge_width=2.0, view_angle='Right')
    assert plot.style.edge_lines is True
    assert plot.style.light is False
    assert plot.style.face_alpha == 0.5
    assert plot.style.edge_alpha == 0.25
    assert plot.style.edge_width == 2.0
    assert plot.view_angle is ViewAngle.RIGHT


def test_subdivisions_reach_meshes():
    plot = core_plot([1], ring_count=2, angular_count=10)
    mesh = plot.layers[0].mesh
    assert len(mesh.prisms) == 10
    assert len(mesh.bricks) == 10


def test_too_many_colors_aborts():
    with pytest.raises(TooManyColors):
        core_plot([1, 2, 3], colors=['#000000', '#111111', '#222222',
                                     '#333333'])


@pytest.mark.parametrize('kwargs, error', [
    ({'view_angle': 'top'}, InvalidArgument),
    ({'z_data_type': 'age'}, InvalidArgument),
    ({'colors': [[300, 0, 0]]}, InvalidColor),
    ({'colors': ['#12345']}, InvalidColor),
])
def test_bad_options(kwargs, error):
    with pytest.raises(error):
        core_plot([1, 2, 3], **kwargs)


def test_fractional_depths_are_placed_exactly():
    depths = [0.1, 0.2, 0.7, 1.3]
    plot = core_plot(depths, z_data_type='depth')
    placed = [plot.layers[0].z_top] + [layer.z_bottom for layer in plot.layers]
    assert placed == depths
    assert plot.zlim == (0.1, 1.3)


def test_hex_with_trailing_newline_is_rejected():
    with pytest.raises(InvalidColor):
        core_plot([1, 2], colors=['#ff8000\n'])
