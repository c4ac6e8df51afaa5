import tarfile

import pytest

from archives import LONG_DIR, add_dir, add_file, hello_entries, pack_archive, tar_bytes


@pytest.fixture()
def hello_archive() -> bytes:
    """A directory ``d/`` and the file ``d/f.txt`` containing ``hello``."""
    return pack_archive(*hello_entries())


@pytest.fixture()
def symlink_archive() -> bytes:
    """Like ``hello_archive``, with ``d/f.txt`` typed as a symbolic link."""
    return pack_archive(*hello_entries(typeflag=b"2"))


@pytest.fixture()
def tree_archive() -> bytes:
    """A nested tree written by ``tarfile``, including a prefix-split name."""

    def build(tf: tarfile.TarFile) -> None:
        add_dir(tf, "top")
        add_file(tf, "top/empty.bin", b"")
        add_file(tf, "top/block.bin", bytes(range(256)) * 2)
        add_file(tf, "top/odd.txt", b"x" * 513)
        add_file(tf, "implicit/parent/file.txt", b"parent created")
        add_file(tf, f"{LONG_DIR}/deep.txt", b"deep")

    return tar_bytes(build)


@pytest.fixture()
def dest(tmp_path):
    path = tmp_path / "out"
    path.mkdir()
    return path
