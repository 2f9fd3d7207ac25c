import pytest

CUBE_CORNER = """\
# a cube corner
v 0.0 0.0 0.0
v 1.0 0.0 0.0
vn 0.0 0.0 1.0
vt 0.5 0.5
"""

FREEFORM = """\
# rational bezier patch header
cstype rat bezier
deg 3 3
step 1 1
vp 0.25 0.5
g patch
f 1 2 3
"""


@pytest.fixture
def cube_corner_lines():
    return CUBE_CORNER.splitlines()


@pytest.fixture
def freeform_lines():
    return FREEFORM.splitlines()


@pytest.fixture
def cube_corner_file(tmp_path):
    path = tmp_path / "corner.obj"
    path.write_text(CUBE_CORNER, encoding="utf-8")
    return path


@pytest.fixture
def freeform_file(tmp_path):
    path = tmp_path / "patch.obj"
    path.write_text(FREEFORM, encoding="utf-8")
    return path
