from __future__ import annotations

import base64
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from genimg_cli.options import GenOptions
from genimg_cli.save import EmptyResponseError, OpenError, open_files, save_images

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"
B64 = base64.b64encode(PNG_BYTES).decode()


def _item(b64: str | None = B64, revised_prompt: str | None = None) -> SimpleNamespace:
    return SimpleNamespace(b64_json=b64, revised_prompt=revised_prompt)


def _response(items, size=None, output_format=None) -> SimpleNamespace:
    return SimpleNamespace(data=items, size=size, output_format=output_format)


class TestSaveImages:
    def test_writes_decoded_bytes(self, tmp_path: Path) -> None:
        opts = GenOptions(directory=str(tmp_path / "out"))
        info = save_images(_response([_item()]), opts, "Neon cat", "1024x1024")

        saved = tmp_path / "out" / "neon-cat-1024x1024.png"
        assert info.paths == [str(saved)]
        assert saved.read_bytes() == PNG_BYTES

    def test_reported_size_and_format_used_for_names(self, tmp_path: Path) -> None:
        opts = GenOptions(directory=str(tmp_path), format="png", count=2)
        info = save_images(
            _response([_item(), _item()], size="1536x1024", output_format="webp"),
            opts,
            "Neon cat",
            "auto",
        )
        assert [Path(p).name for p in info.paths] == [
            "neon-cat-1536x1024-01.webp",
            "neon-cat-1536x1024-02.webp",
        ]
        assert info.size == "1536x1024"
        assert info.format == "webp"

    def test_revised_prompt_names_file_but_report_keeps_prompt(self, tmp_path: Path) -> None:
        opts = GenOptions(model="dall-e-3", directory=str(tmp_path))
        info = save_images(_response([_item(revised_prompt="A glowing neon cat")]), opts, "cat", "1024x1024")
        assert Path(info.paths[0]).name == "a-glowing-neon-cat-1024x1024.png"
        assert info.prompt == "cat"

    def test_count_follows_returned_items(self, tmp_path: Path) -> None:
        opts = GenOptions(directory=str(tmp_path), count=3)
        info = save_images(_response([_item()]), opts, "fox", "1024x1024")
        assert Path(info.paths[0]).name == "fox-1024x1024.png"

    def test_explicit_out(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "final.png"
        opts = GenOptions(out=str(target))
        info = save_images(_response([_item()]), opts, "fox", "1024x1024")
        assert info.paths == [str(target)]
        assert target.exists()

    @pytest.mark.parametrize("items", [[], None])
    def test_no_images(self, tmp_path: Path, items) -> None:
        with pytest.raises(EmptyResponseError, match="did not return any images"):
            save_images(_response(items), GenOptions(directory=str(tmp_path)), "fox", "1024x1024")

    def test_item_without_data(self, tmp_path: Path) -> None:
        with pytest.raises(EmptyResponseError, match="without base64 content"):
            save_images(_response([_item(None)]), GenOptions(directory=str(tmp_path)), "fox", "1024x1024")


class TestOpenFiles:
    def test_runs_open(self) -> None:
        with patch("genimg_cli.save.subprocess.run") as mock_run:
            mock_run.return_value.returncode = 0
            open_files(["/a.png", "/b.png"])
            cmd = mock_run.call_args[0][0]
            assert cmd == ["open", "/a.png", "/b.png"]

    def test_non_zero_exit(self) -> None:
        with patch("genimg_cli.save.subprocess.run") as mock_run:
            mock_run.return_value.returncode = 3
            with pytest.raises(OpenError, match="open exited with code 3"):
                open_files(["/a.png"])

    def test_spawn_failure(self) -> None:
        with patch("genimg_cli.save.subprocess.run", side_effect=FileNotFoundError("open")):
            with pytest.raises(OpenError):
                open_files(["/a.png"])
