"""Tests for the command-line entry point."""

import pytest
from displayname.__main__ import (
    EXIT_FAILED,
    EXIT_OK,
    EXIT_WOULD_CHANGE,
    collect_files,
    main,
)

MEMO_SOURCE = "export const Memo = React.memo(Inner);\n"
MEMO_EXPECTED = MEMO_SOURCE + 'Memo.displayName = "Memo";\n'
PLAIN_SOURCE = "export const answer = 42;\n"


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A small source tree; the working directory holds no config file."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "Memo.tsx").write_text(MEMO_SOURCE, encoding="utf-8")
    (src / "answer.ts").write_text(PLAIN_SOURCE, encoding="utf-8")
    (src / "README.md").write_text("# docs\n", encoding="utf-8")
    vendored = tmp_path / "src" / "node_modules" / "lib"
    vendored.mkdir(parents=True)
    (vendored / "index.js").write_text("const A = React.memo(B);\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


# =========================================================================
# Tests: File collection
# =========================================================================

class TestCollectFiles:
    def test_directory_walk(self, project):
        files, missing = collect_files([str(project / "src")])
        assert [p.rsplit("/", 1)[-1] for p in files] == ["Memo.tsx", "answer.ts"]
        assert missing == []

    def test_missing_target(self, project):
        files, missing = collect_files(["nope"])
        assert files == []
        assert missing == ["nope"]


# =========================================================================
# Tests: main
# =========================================================================

class TestMain:
    def test_prints_to_stdout(self, project, capsys):
        assert main([str(project / "src" / "Memo.tsx")]) == EXIT_OK
        assert capsys.readouterr().out == MEMO_EXPECTED

    def test_write(self, project):
        assert main(["--write", str(project / "src")]) == EXIT_OK
        assert (project / "src" / "Memo.tsx").read_text(encoding="utf-8") == MEMO_EXPECTED
        assert (project / "src" / "answer.ts").read_text(encoding="utf-8") == PLAIN_SOURCE

    def test_write_keeps_undecodable_bytes(self, project):
        path = project / "src" / "Latin1.tsx"
        path.write_bytes(b"// caf\xe9\nconst Memo = React.memo(Inner);\r\n")
        assert main(["--write", str(path)]) == EXIT_OK
        assert path.read_bytes() == (
            b"// caf\xe9\nconst Memo = React.memo(Inner);\r\n"
            b'Memo.displayName = "Memo";\r\n'
        )

    def test_check(self, project, capsys):
        memo = str(project / "src" / "Memo.tsx")
        assert main(["--check", str(project / "src")]) == EXIT_WOULD_CHANGE
        assert capsys.readouterr().out.splitlines() == [memo]
        # Nothing written
        assert (project / "src" / "Memo.tsx").read_text(encoding="utf-8") == MEMO_SOURCE

    def test_check_clean(self, project):
        assert main(["--check", str(project / "src" / "answer.ts")]) == EXIT_OK

    def test_missing_path(self, project):
        assert main(["missing.tsx"]) == EXIT_FAILED

    def test_unsupported_file(self, project):
        assert main([str(project / "src" / "README.md")]) == EXIT_FAILED

    def test_factory_override(self, project, capsys):
        path = project / "src" / "Store.tsx"
        path.write_text("const Store = observer(View);\n", encoding="utf-8")
        assert main(["--factory", "observer", str(path)]) == EXIT_OK
        assert capsys.readouterr().out.endswith('Store.displayName = "Store";\n')

    def test_config_file(self, project, capsys):
        config = project / "custom.yaml"
        config.write_text("displayname:\n  factory_function_names: [observer]\n", encoding="utf-8")
        path = project / "src" / "Store.tsx"
        path.write_text("const Store = observer(View);\n", encoding="utf-8")
        assert main(["--config", str(config), str(path)]) == EXIT_OK
        assert 'Store.displayName = "Store";' in capsys.readouterr().out

    def test_default_config_in_working_directory(self, project, capsys):
        (project / "displayname.yaml").write_text("factoryFuncs: [observer]\n", encoding="utf-8")
        path = project / "src" / "Memo.tsx"
        assert main([str(path)]) == EXIT_OK
        # React.memo is no longer a configured factory
        assert capsys.readouterr().out == MEMO_SOURCE

    def test_invalid_config(self, project):
        config = project / "bad.yaml"
        config.write_text("unknown_option: 1\n", encoding="utf-8")
        assert main(["--config", str(config), "src"]) == EXIT_FAILED

    def test_only_root(self, project, capsys):
        path = project / "src" / "nested.tsx"
        path.write_text(
            "function f() {\n  const Inner = React.memo(X);\n}\n", encoding="utf-8"
        )
        assert main(["--only-root", str(path)]) == EXIT_OK
        assert "displayName" not in capsys.readouterr().out

    def test_no_only_root_overrides_config(self, project, capsys):
        (project / "displayname.yaml").write_text("only_root: true\n", encoding="utf-8")
        path = project / "src" / "nested.tsx"
        path.write_text(
            "function f() {\n  const Inner = React.memo(X);\n}\n", encoding="utf-8"
        )
        assert main([str(path)]) == EXIT_OK
        assert "displayName" not in capsys.readouterr().out

        assert main(["--no-only-root", str(path)]) == EXIT_OK
        assert '  Inner.displayName = "Inner";' in capsys.readouterr().out
