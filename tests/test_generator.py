import logging
import zipfile
from argparse import Namespace
from pathlib import Path
from typing import Any

import pytest

from propkeys.__main__ import main
from propkeys.config import GeneratorConfig
from propkeys.errors import UsageError
from propkeys.generator import generate, generate_source, load_keys
from propkeys.key_tree import build_tree
from propkeys.renderers import render


_PROPERTIES = """\
# server settings
web.port = 8080
web.host = localhost
realm.ldap.server = ldap://example
name = demo
"""


@pytest.fixture
def properties_file(tmp_path: Path) -> Path:
    path = tmp_path / "app.properties"
    _ = path.write_text(_PROPERTIES, encoding="iso-8859-1")
    return path


def _argv(tmp_path: Path, properties: Path, *extra: str) -> list[str]:
    return [
        "-out",
        str(tmp_path / "keys.zip"),
        "-properties",
        str(properties),
        "-classname",
        "com.acme.Keys",
        "-tmp",
        str(tmp_path / "stage"),
        *extra,
    ]


def _read_single_entry(archive_path: Path) -> tuple[str, str]:
    with zipfile.ZipFile(archive_path) as archive:
        names = archive.namelist()
        assert len(names) == 1
        return names[0], archive.read(names[0]).decode("utf-8")


def test_load_keys_returns_sorted_keys(properties_file: Path) -> None:
    assert load_keys(properties_file) == ["name", "realm.ldap.server", "web.host", "web.port"]


def test_load_keys_logs_and_returns_empty_on_failure(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="propkeys"):
        assert load_keys(tmp_path / "missing.properties") == []
    assert "failed to load properties" in caplog.text


def test_generate_source_matches_render() -> None:
    keys = ["a.b", "a.c", "d"]
    assert generate_source(keys, "com.acme.Keys", "java") == render(build_tree(keys), "com.acme.Keys", "java")


def test_generate_writes_archive_and_staged_file(tmp_path: Path, properties_file: Path) -> None:
    config = GeneratorConfig(
        archive_path=tmp_path / "keys.zip",
        properties_path=properties_file,
        type_name="com.acme.Keys",
        tmp_dir=tmp_path / "stage",
    )

    assert generate(config) == "com/acme/Keys.py"

    entry, contents = _read_single_entry(tmp_path / "keys.zip")
    assert entry == "com/acme/Keys.py"
    assert (tmp_path / "stage" / "com" / "acme" / "Keys.py").read_text(encoding="utf-8") == contents

    namespace: dict[str, Any] = {}
    exec(compile(contents, entry, "exec"), namespace)
    keys = namespace["Keys"]
    assert keys.name == "name"
    assert keys.web.port == "web.port"
    assert keys.realm.ldap._ROOT == "realm.ldap"
    assert keys.realm.ldap.server == "realm.ldap.server"


def test_generate_is_deterministic(tmp_path: Path, properties_file: Path) -> None:
    first = GeneratorConfig(tmp_path / "one.zip", properties_file, "com.acme.Keys", tmp_path / "one")
    second = GeneratorConfig(tmp_path / "two.zip", properties_file, "com.acme.Keys", tmp_path / "two")
    _ = generate(first)
    _ = generate(second)

    assert _read_single_entry(tmp_path / "one.zip") == _read_single_entry(tmp_path / "two.zip")


def test_config_from_namespace_reports_first_missing_option() -> None:
    args = Namespace(out="k.zip", properties=None, classname=None, tmp=None, language="python")
    with pytest.raises(UsageError, match="temporary directory"):
        _ = GeneratorConfig.from_namespace(args)

    args.tmp = "stage"
    with pytest.raises(UsageError, match="output classname"):
        _ = GeneratorConfig.from_namespace(args)

    args.classname = "Keys"
    with pytest.raises(UsageError, match="input properties file"):
        _ = GeneratorConfig.from_namespace(args)

    args.properties = "app.properties"
    config = GeneratorConfig.from_namespace(args)
    assert config.archive_path == Path("k.zip")
    assert config.tmp_dir == Path("stage")
    assert config.language == "python"


def test_main_success(tmp_path: Path, properties_file: Path) -> None:
    assert main(_argv(tmp_path, properties_file)) == 0

    entry, contents = _read_single_entry(tmp_path / "keys.zip")
    assert entry == "com/acme/Keys.py"
    assert '        port: Final = "web.port"\n' in contents


def test_main_java_language(tmp_path: Path, properties_file: Path) -> None:
    assert main(_argv(tmp_path, properties_file, "-language", "java")) == 0

    entry, contents = _read_single_entry(tmp_path / "keys.zip")
    assert entry == "com/acme/Keys.java"
    assert contents.startswith("package com.acme;\n")
    assert '\t\tpublic static final String port = "web.port";\n' in contents


@pytest.mark.parametrize(
    ("dropped", "message"),
    [
        ("-tmp", "Please specify a temporary directory!"),
        ("-classname", "Please specify an output classname!"),
        ("-properties", "Please specify an input properties file!"),
        ("-out", "Please specify an output zip file!"),
    ],
)
def test_main_missing_option_prints_usage_and_exits_1(
    tmp_path: Path, properties_file: Path, capsys: pytest.CaptureFixture[str], dropped: str, message: str
) -> None:
    argv = _argv(tmp_path, properties_file)
    index = argv.index(dropped)
    del argv[index : index + 2]

    assert main(argv) == 1

    err = capsys.readouterr().err
    assert err.startswith(message + "\n")
    assert "usage: propkeys" in err
    assert not (tmp_path / "stage").exists()
    assert not (tmp_path / "keys.zip").exists()


def test_main_unknown_option_exits_1(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = main(["-bogus", "x"])
    assert excinfo.value.code == 1
    assert "usage: propkeys" in capsys.readouterr().err


def test_main_unreadable_properties_still_generates_empty_class(tmp_path: Path) -> None:
    assert main(_argv(tmp_path, tmp_path / "missing.properties")) == 0

    _, contents = _read_single_entry(tmp_path / "keys.zip")
    assert contents == render(build_tree([]), "com.acme.Keys")


def test_main_output_failure_exits_1(tmp_path: Path, properties_file: Path) -> None:
    argv = _argv(tmp_path, properties_file)
    argv[1] = str(tmp_path / "missing" / "keys.zip")

    assert main(argv) == 1


def test_load_keys_keeps_keys_read_before_malformed_escape(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "broken.properties"
    _ = path.write_text("a.ok=1\nb=\\u12\nc=3\n", encoding="iso-8859-1")

    with caplog.at_level(logging.ERROR, logger="propkeys"):
        assert load_keys(path) == ["a.ok"]
    assert "continuing with 1 keys" in caplog.text


def test_main_writes_lone_surrogate_key_with_replacement(tmp_path: Path) -> None:
    path = tmp_path / "surrogate.properties"
    _ = path.write_text("k\\uD800=1\n", encoding="iso-8859-1")

    assert main(_argv(tmp_path, path)) == 0

    _, contents = _read_single_entry(tmp_path / "keys.zip")
    assert '    k?: Final = "k?"\n' in contents


def test_main_shadowed_key_exits_1_without_archive(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "shadowed.properties"
    _ = path.write_text("a = 1\na.b = 2\n", encoding="iso-8859-1")

    with caplog.at_level(logging.ERROR, logger="propkeys"):
        assert main(_argv(tmp_path, path)) == 1
    assert "key 'a' collides" in caplog.text
    assert not (tmp_path / "keys.zip").exists()

    assert main(_argv(tmp_path, path, "-language", "java")) == 0


def test_main_rejects_classname_with_empty_segment(
    tmp_path: Path, properties_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    argv = _argv(tmp_path, properties_file)
    argv[argv.index("-classname") + 1] = "com..Keys"

    assert main(argv) == 1
    err = capsys.readouterr().err
    assert "Invalid classname 'com..Keys'" in err
    assert "usage: propkeys" in err
    assert not (tmp_path / "stage").exists()


def test_main_encoding_option(tmp_path: Path) -> None:
    path = tmp_path / "utf8.properties"
    _ = path.write_text("café.menu = 1\n", encoding="utf-8")

    assert main(_argv(tmp_path, path, "-encoding", "utf-8")) == 0

    _, contents = _read_single_entry(tmp_path / "keys.zip")
    assert '        menu: Final = "café.menu"\n' in contents


def test_config_from_namespace_reads_and_checks_encoding() -> None:
    args = Namespace(out="k.zip", properties="p", classname="Keys", tmp="t", language="java", encoding="utf-8")
    config = GeneratorConfig.from_namespace(args)
    assert (config.language, config.encoding) == ("java", "utf-8")

    args.encoding = "no-such-codec"
    with pytest.raises(UsageError, match="Unknown properties encoding"):
        _ = GeneratorConfig.from_namespace(args)
