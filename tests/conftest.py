import io

import pytest
from PIL import Image


def png_bytes(w, h, color=(46, 125, 246, 255)):
    buf = io.BytesIO()
    Image.new("RGBA", (w, h), color).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def master():
    # wide, so cover crops and contain pads
    img = Image.new("RGBA", (300, 200), (14, 165, 233, 255))
    img.paste((255, 255, 255, 255), (100, 50, 200, 150))
    return img
