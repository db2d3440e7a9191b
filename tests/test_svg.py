import pytest

from qrforge.layout import create_matrix_pattern
from qrforge.matrix import QRCode
from qrforge.module import Module, ModuleType
from qrforge.style import ImageBackgroundShape, ModuleStyle, Shape
from qrforge.svg import SvgBuilder, SvgOptions, parse_color

DATA_URI = (
    "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAABAAAAAQCAIAAACQkWg2AAAAFUlEQVR4"
    "AWP4oyVDEhrGGkY1jGoAABACQhA+7XDPAAAAAElFTkSuQmCC"
)


def finder_matrix():
    qr = QRCode.default(21)
    create_matrix_pattern(qr)
    return qr


def all_dark():
    qr = QRCode.default(21)
    for row in qr.rows:
        for module in row:
            module.set(True)
    return qr


def test_embeds_image_via_data_uri():
    svg = SvgBuilder().image(DATA_URI).to_str(finder_matrix())
    assert f'href="{DATA_URI}"' in svg


def test_svg_is_not_inverted():
    margin = 4
    qr = finder_matrix()
    svg = SvgBuilder().margin(margin).to_str(qr)
    for y in range(qr.size):
        for x in range(qr.size):
            module = qr[y][x]
            if module.value() and module.module_type() is ModuleType.FINDER_PATTERN:
                assert f"M{x + margin},{y + margin}h1v1h-1z" in svg


def test_document_frame():
    qr = finder_matrix()
    svg = SvgBuilder().margin(0).to_str(qr)
    assert svg.startswith('<svg viewBox="0 0 21 21" xmlns="http://www.w3.org/2000/svg">')
    assert '<rect width="21px" height="21px" fill="#ffffff"/>' in svg
    assert svg.endswith("</svg>")


def test_light_modules_are_not_drawn():
    svg = SvgBuilder().margin(0).to_str(QRCode.default(21))
    assert svg.count("M") == 0


def test_dark_data_module_uses_square_style():
    qr = QRCode.default(21)
    qr[10][12].set(True)
    svg = SvgBuilder().margin(0).to_str(qr)
    assert "M12.00,10.00h1.00v1.00h-1.00z" in svg


def test_module_and_background_colors():
    svg = (
        SvgBuilder()
        .module_color([255, 0, 0])
        .background_color("#123456")
        .to_str(finder_matrix())
    )
    assert 'fill="#ff0000"/>' in svg
    assert 'fill="#123456"/>' in svg


def test_as_bytes_matches_to_str():
    builder = SvgBuilder().style(ModuleStyle(Shape.CIRCLE))
    qr = finder_matrix()
    assert builder.as_bytes(qr) == builder.to_str(qr).encode("utf-8")


def test_to_file(tmp_path):
    builder = SvgBuilder()
    qr = finder_matrix()
    target = tmp_path / "out.svg"
    builder.to_file(qr, target)
    assert target.read_text(encoding="utf-8") == builder.to_str(qr)


def test_rounded_square_adds_stroke():
    svg = SvgBuilder().style(ModuleStyle(Shape.ROUNDED_SQUARE)).to_str(finder_matrix())
    assert 'stroke-width=".3" stroke-linejoin="round" stroke="#000000"' in svg


def test_each_style_gets_its_own_path_and_color():
    svg = (
        SvgBuilder()
        .style(ModuleStyle(Shape.SQUARE))
        .style(ModuleStyle(Shape.CIRCLE, 1.0, "#00ff00"))
        .to_str(finder_matrix())
    )
    assert svg.count("<path") == 2
    assert 'fill="#00ff00"/>' in svg
    assert 'fill="#000000"/>' in svg


def test_connected_lone_module_is_a_dot():
    qr = QRCode.default(21)
    qr[10][10] = Module.data(True)
    svg = SvgBuilder().style(ModuleStyle(Shape.CONNECTED)).to_str(qr)
    assert "M14,14.5 a0.5 0.5,0,0,0,1,0a0.5 0.5,0,0,0,-1,0z" in svg


def test_image_hides_centre_modules():
    qr = all_dark()
    plain = SvgBuilder().margin(0).to_str(qr)
    covered = SvgBuilder().margin(0).image(DATA_URI).to_str(qr)
    assert "M10.00,10.00h1.00" in plain
    assert "M10.00,10.00h1.00" not in covered
    assert "M0.00,0.00h1.00" in covered
    assert covered.count("h-1.00z") < plain.count("h-1.00z")


def test_image_background_shapes():
    qr = finder_matrix()
    circle = (
        SvgBuilder().image(DATA_URI).image_background_shape(ImageBackgroundShape.CIRCLE)
    ).to_str(qr)
    rounded = (
        SvgBuilder()
        .image(DATA_URI)
        .image_background_shape(ImageBackgroundShape.ROUNDED_SQUARE)
    ).to_str(qr)
    assert 'rx="1000px"' in circle
    assert 'rx="1px"' in rounded


def test_image_size_override():
    svg = SvgBuilder().image(DATA_URI).image_size(4).image_gap(1).to_str(finder_matrix())
    assert 'width="4.00" height="4.00"' in svg


def test_image_background_color():
    svg = (
        SvgBuilder().image(DATA_URI).image_background_color([1, 2, 3, 4]).to_str(finder_matrix())
    )
    assert 'fill="#01020304"' in svg


def test_invalid_size_rejected_with_image():
    with pytest.raises(ValueError):
        SvgBuilder().image(DATA_URI).to_str(QRCode.default(10))


def test_negative_margin_rejected():
    with pytest.raises(ValueError):
        SvgBuilder().margin(-1)


def test_parse_color():
    assert parse_color("#ff000080") == [255, 0, 0, 128]
    assert parse_color("00ff00") == [0, 255, 0, 255]
    with pytest.raises(ValueError):
        parse_color("#zz0000")


def test_options_configure_builder():
    options = SvgOptions(
        margin=2,
        module_color="#ff0000",
        image=DATA_URI,
        image_size=[4.0, 1.0],
    )
    assert options.module_color == [255, 0, 0, 255]
    builder = options.configure(SvgBuilder())
    svg = builder.to_str(finder_matrix())
    assert '<svg viewBox="0 0 25 25"' in svg
    assert f'href="{DATA_URI}"' in svg
    assert 'fill="#ff0000"/>' in svg


def test_options_without_image_embed_nothing():
    svg = SvgOptions().configure(SvgBuilder()).to_str(finder_matrix())
    assert "<image" not in svg
    assert svg.count("<path") == 1