import pytest

from coreplot.colors import (hex_to_rgb, legend_visibility, normalize_rgb,
                             parse_color_spec, resolve_colors, rgb_to_hex,
                             to_uint8, unique_colors)
from coreplot.errors import InvalidArgument, InvalidColor, TooManyColors
from coreplot.models import DefaultColors, HexColors, RgbColors

GRAY_DARK = hex_to_rgb('#6e7f80')
GRAY_LIGHT = hex_to_rgb('#c0c0c0')


# ── Conversions ──────────────────────────────────────────────────────────

def test_hex_to_rgb():
    assert hex_to_rgb('#ff8000') == (1.0, 128 / 255, 0.0)
    assert hex_to_rgb('#FF8000') == hex_to_rgb('#ff8000')


@pytest.mark.parametrize('code', ['ff8000', '#ff80', '#ff800000', '#gg0000',
                                  '#ff8000\n', ' #ff8000',
                                  '', 123, None])
def test_malformed_hex(code):
    with pytest.raises(InvalidColor):
        hex_to_rgb(code)


@pytest.mark.parametrize('rgb', [
    (0.0, 0.0, 0.0),
    (1.0, 1.0, 1.0),
    (0.2, 0.5, 0.9),
    (0.123, 0.456, 0.789),
])
def test_hex_rgb_round_trip(rgb):
    assert hex_to_rgb(rgb_to_hex(rgb)) == pytest.approx(rgb, abs=0.5 / 255)


def test_rgb_to_hex():
    assert rgb_to_hex((1.0, 128 / 255, 0.0)) == '#ff8000'
    with pytest.raises(InvalidColor):
        rgb_to_hex((1.2, 0.0, 0.0))
    with pytest.raises(InvalidColor):
        rgb_to_hex((0.5, 0.5))


def test_to_uint8():
    assert to_uint8(hex_to_rgb('#e1a95f')) == [225, 169, 95]


def test_normalize_rgb_detects_8bit():
    out = normalize_rgb([[225, 169, 95], [51, 0, 0]])
    assert out.tolist() == pytest.approx([[225 / 255, 169 / 255, 95 / 255],
                                          [51 / 255, 0.0, 0.0]])
    assert normalize_rgb([0.5, 0.25, 1.0]).tolist() == [[0.5, 0.25, 1.0]]


@pytest.mark.parametrize('values', [
    [[-1, 0, 0]],
    [[256, 0, 0]],
    [[0.5, 0.5]],
    [[float('nan'), 0, 0]],
])
def test_normalize_rgb_rejects(values):
    with pytest.raises(InvalidColor):
        normalize_rgb(values)


# ── Parsing ──────────────────────────────────────────────────────────────

def test_parse_default():
    assert isinstance(parse_color_spec(None), DefaultColors)
    assert isinstance(parse_color_spec('default'), DefaultColors)


def test_parse_hex():
    assert parse_color_spec('#fea12c') == HexColors(('#fea12c',))
    spec = parse_color_spec(['#fea12c', '#b147ce'])
    assert spec == HexColors(('#fea12c', '#b147ce'))


def test_parse_rgb():
    spec = parse_color_spec([225, 169, 95])
    assert isinstance(spec, RgbColors)
    assert len(spec.triples) == 1
    spec = parse_color_spec([[225, 169, 95], [51, 0, 0], [152, 129, 123]])
    assert len(spec.triples) == 3
    assert spec.triples[1] == pytest.approx((0.2, 0.0, 0.0))


@pytest.mark.parametrize('colors', [
    [],
    ['#fea12c', [0, 0, 0]],
    [[1, 2, 3], [4, 5]],
    ['red'],
    42,
])
def test_parse_rejects(colors):
    with pytest.raises(InvalidColor):
        parse_color_spec(colors)


# ── Resolution ───────────────────────────────────────────────────────────

def test_default_alternates_from_top():
    colors = resolve_colors(6)
    assert colors == [GRAY_DARK, GRAY_LIGHT] * 3


def test_default_single_layer():
    assert resolve_colors(1) == [GRAY_DARK]


def test_single_color_fills_every_layer():
    assert resolve_colors(5, '#fea12c') == [hex_to_rgb('#fea12c')] * 5
    assert resolve_colors(3, [0, 0, 255]) == [(0.0, 0.0, 1.0)] * 3


@pytest.mark.parametrize('n_layers', [3, 4, 7, 10])
def test_fewer_colors_repeat(n_layers):
    spec = ['#fea12c', '#b147ce', '#20d962']
    colors = resolve_colors(n_layers, spec)
    assert len(colors) == n_layers
    for i, rgb in enumerate(colors):
        assert rgb == hex_to_rgb(spec[i % 3])


def test_equal_count_is_one_to_one():
    spec = [[225, 169, 95], [51, 0, 0], [152, 129, 123]]
    colors = resolve_colors(3, spec)
    assert colors == [pytest.approx((r / 255, g / 255, b / 255))
                      for r, g, b in spec]


def test_too_many_colors():
    with pytest.raises(TooManyColors) as exc:
        resolve_colors(2, ['#000000', '#111111', '#222222'])
    assert exc.value.n_colors == 3
    assert exc.value.n_layers == 2


@pytest.mark.parametrize('n_layers', [0, -1, 2.5, True])
def test_bad_layer_count(n_layers):
    with pytest.raises(InvalidArgument):
        resolve_colors(n_layers)


# ── Legend ───────────────────────────────────────────────────────────────

def test_default_legend_shows_first_two():
    flags = legend_visibility(resolve_colors(6))
    assert [i for i, f in enumerate(flags) if f] == [0, 1]


@pytest.mark.parametrize('sequence', [
    ['a', 'b', 'a', 'c', 'b', 'c', 'c'],
    ['a'],
    ['a', 'a', 'a'],
    ['c', 'b', 'a'],
])
def test_one_visible_layer_per_color(sequence):
    palette = {'a': (1.0, 0.0, 0.0), 'b': (0.0, 1.0, 0.0), 'c': (0.0, 0.0, 1.0)}
    colors = [palette[s] for s in sequence]
    flags = legend_visibility(colors)
    for name in set(sequence):
        visible = [i for i, s in enumerate(sequence) if s == name and flags[i]]
        assert visible == [sequence.index(name)]


def test_unique_colors_keep_first_seen_order():
    colors = resolve_colors(7, ['#20d962', '#fea12c'])
    assert unique_colors(colors) == [hex_to_rgb('#20d962'),
                                     hex_to_rgb('#fea12c')]


def test_hex_case_does_not_split_legend():
    flags = legend_visibility(resolve_colors(2, ['#ABCDEF', '#abcdef']))
    assert flags == [True, False]
