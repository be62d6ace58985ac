import io

from PIL import Image

from app_icons.ico import ico_payloads, read_ico
from app_icons.png import check_frames
from app_icons.resize import fit_contain, fit_cover, ico_frames, make_favicon, to_png


def test_fit_contain_pads_transparent(master):
    out = fit_contain(master, 30)
    assert out.size == (30, 30)
    assert out.mode == "RGBA"
    # 300x200 -> 30x20, centred with 5px transparent bands top and bottom
    assert out.getpixel((15, 0))[3] == 0
    assert out.getpixel((15, 29))[3] == 0
    assert out.getpixel((0, 15))[3] == 255


def test_fit_cover_fills_square(master):
    out = fit_cover(master, 40)
    assert out.size == (40, 40)
    assert out.getpixel((0, 0))[3] == 255
    assert out.getpixel((39, 39))[3] == 255


def test_to_png_roundtrip(master):
    with Image.open(io.BytesIO(to_png(master))) as im:
        assert im.size == (300, 200)


def test_ico_frames_sizes_and_order(master):
    frames = ico_frames(master, sizes=(48, 16))
    assert [f.size for f in frames] == [48, 16]
    check_frames(frames)


def test_make_favicon(master):
    data = make_favicon(master)
    assert [e.width for e in read_ico(data)] == [16, 32, 48]
    for size, payload in ico_payloads(data):
        with Image.open(io.BytesIO(payload)) as im:
            assert im.size == (size, size)
