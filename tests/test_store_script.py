"""Tests for the store maintenance script."""

import json

from workshop_api.db.store import DocumentStore
from workshop_api.scripts.store import main


def test_show_seeds_and_prints(tmp_path, capsys) -> None:
    path = tmp_path / "db.json"

    assert main(["--path", str(path), "--show"]) == 0

    printed = json.loads(capsys.readouterr().out)
    assert [u["id"] for u in printed["users"]] == [1, 2, 3]
    assert path.exists()


def test_reset_discards_changes(store, capsys) -> None:
    store.data.posts.clear()
    store.write()

    assert main(["--path", str(store.path), "--reset"]) == 0

    assert "reset" in capsys.readouterr().out
    assert len(DocumentStore(store.path).open().posts) == 2


def test_corrupt_store_exits_nonzero(tmp_path, capsys) -> None:
    path = tmp_path / "db.json"
    path.write_text("[]", encoding="utf-8")

    assert main(["--path", str(path)]) == 1
    assert "ERROR" in capsys.readouterr().err
