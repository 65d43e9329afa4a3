import pytest
from stylegate.errors import ToolUnavailableError, VersionMismatchError, VersionUnparseableError
from stylegate.tools.clang_format import ClangFormatTool
from stylegate.tools.cppcheck import CppcheckTool
from stylegate.tools.dialect import RegexDialect
from stylegate.tools.interfaces import VerifyContext
from stylegate.tools.pep8 import Pep8Tool
from stylegate.tools.vera import VeraTool
from stylegate.tools.version import ToolVersion

# ----------------------------
# vera++
# ----------------------------


def test_vera_runs_smoke_test_then_profile_check(ctx, runner):
    assert VeraTool("vera++").verify(ctx) is None
    assert runner.calls_to("vera++") == [
        ("vera++", "./nest/main.cpp"),
        ("vera++", "--profile", "nest", "./nest/main.cpp"),
    ]


def test_vera_smoke_test_failure_names_executable(ctx, runner):
    runner.on("/opt/vera", returncode=127)

    with pytest.raises(ToolUnavailableError) as ei:
        VeraTool("/opt/vera").verify(ctx)

    assert "Executable: /opt/vera" in str(ei.value)
    assert ei.value.code == "tool_unavailable"
    # the profile check never ran
    assert len(runner.calls_to("/opt/vera")) == 1


def test_vera_missing_profile_points_to_docs(ctx, runner):
    runner.on("vera++", "--profile", returncode=1)

    with pytest.raises(ToolUnavailableError) as ei:
        VeraTool("vera++").verify(ctx)

    msg = str(ei.value)
    assert "The profile 'nest' could not be found" in msg
    assert "https://" in msg


# ----------------------------
# pep8
# ----------------------------


def test_pep8_smoke_test_arguments(ctx, runner):
    assert Pep8Tool("pep8").verify(ctx) is None
    assert runner.calls_to("pep8") == [("pep8", "--ignore=E121", "./extras/parse_travis_log.py")]


def test_pep8_failure(ctx, runner):
    runner.on("pep8", returncode=1)
    with pytest.raises(ToolUnavailableError, match="PEP8 installation. Executable: pep8"):
        Pep8Tool("pep8").verify(ctx)


# ----------------------------
# cppcheck
# ----------------------------


@pytest.mark.parametrize(
    "output, expected",
    [
        ("Cppcheck 1.69", ToolVersion(1, 69)),
        ("Cppcheck 1.70", ToolVersion(1, 70)),
        ("Cppcheck 2.0", ToolVersion(2, 0)),
        ("Cppcheck 2.13.0", ToolVersion(2, 13)),
        ("1.90", ToolVersion(1, 90)),
    ],
)
def test_cppcheck_accepts_1_69_or_later(ctx, runner, output, expected):
    runner.on("cppcheck", "--version", stdout=output + "\n")
    assert CppcheckTool("cppcheck").verify(ctx) == expected


@pytest.mark.parametrize("output", ["Cppcheck 1.68", "Cppcheck 1.9", "Cppcheck 0.99"])
def test_cppcheck_rejects_older_versions(ctx, runner, output):
    runner.on("cppcheck", "--version", stdout=output + "\n")

    with pytest.raises(VersionMismatchError) as ei:
        CppcheckTool("cppcheck").verify(ctx)

    assert not isinstance(ei.value, VersionUnparseableError)
    assert "1.69 or later" in str(ei.value)


@pytest.mark.parametrize("output", ["Cppcheck 2", "Cppcheck dev", ""])
def test_cppcheck_unparseable_version_fails(ctx, runner, output):
    runner.on("cppcheck", "--version", stdout=output)

    with pytest.raises(VersionUnparseableError) as ei:
        CppcheckTool("cppcheck").verify(ctx)

    assert ei.value.code == "version_unparseable"


def test_cppcheck_smoke_test_arguments(ctx, runner):
    CppcheckTool("cppcheck").verify(ctx)
    assert runner.calls_to("cppcheck")[0] == (
        "cppcheck",
        "--enable=all",
        "--inconclusive",
        "--std=c++03",
        "./nest/main.cpp",
    )


def test_cppcheck_smoke_test_failure_skips_version_check(ctx, runner):
    runner.on("cppcheck", "--enable=all", returncode=1)

    with pytest.raises(ToolUnavailableError):
        CppcheckTool("cppcheck").verify(ctx)

    assert ("cppcheck", "--version") not in runner.calls


# ----------------------------
# clang-format
# ----------------------------


@pytest.mark.parametrize(
    "output",
    [
        "clang-format version 3.6.2 (tags/RELEASE_362/final)",
        "Ubuntu clang-format version 3.6.0-2ubuntu1~trusty1 (tags/RELEASE_360/final) (based on LLVM 3.6.0)",
        "3.6",
    ],
)
def test_clang_format_accepts_3_6(ctx, runner, output):
    runner.on("clang-format-3.6", "--version", stdout=output + "\n")
    assert ClangFormatTool("clang-format-3.6").verify(ctx) == ToolVersion(3, 6)


@pytest.mark.parametrize(
    "output",
    [
        "clang-format version 3.5.0",
        "clang-format version 3.7.1",
        "3.5",
        "3.7",
        "3.06",
        "03.6",
    ],
)
def test_clang_format_rejects_other_versions(ctx, runner, output):
    runner.on("clang-format-3.6", "--version", stdout=output + "\n")

    with pytest.raises(VersionMismatchError, match="Version 3.6 is required"):
        ClangFormatTool("clang-format-3.6").verify(ctx)


@pytest.mark.parametrize("output", ["clang-format version 10", "", "unknown"])
def test_clang_format_unparseable_version_fails(ctx, runner, output):
    runner.on("clang-format-3.6", "--version", stdout=output)

    with pytest.raises(VersionUnparseableError):
        ClangFormatTool("clang-format-3.6").verify(ctx)


def test_clang_format_extracts_version_with_probed_dialect(tmp_path, runner):
    runner.sed_flags = ("-E",)
    ctx = VerifyContext(repo_root=tmp_path, runner=runner, dialect=RegexDialect.EXTENDED_E)

    assert ClangFormatTool("clang-format-3.6").verify(ctx) == ToolVersion(3, 6)
    assert runner.calls_to("sed")[0][:2] == ("sed", "-E")


def test_clang_format_with_unusable_dialect_is_unparseable(tmp_path, runner):
    runner.sed_flags = ("-E",)
    ctx = VerifyContext(repo_root=tmp_path, runner=runner, dialect=RegexDialect.EXTENDED_R)

    with pytest.raises(VersionUnparseableError):
        ClangFormatTool("clang-format-3.6").verify(ctx)


def test_clang_format_smoke_test_uses_style_file(ctx, runner):
    ClangFormatTool("clang-format-3.6").verify(ctx)
    assert runner.calls_to("clang-format-3.6")[0] == (
        "clang-format-3.6",
        "-style=./.clang-format",
        "./nest/main.cpp",
    )


def test_clang_format_failing_version_call_still_reports_output(ctx, runner):
    runner.on("clang-format-3.6", "--version", returncode=1, stdout="clang-format version 3.5.0\n")

    with pytest.raises(VersionMismatchError, match="is of version 3.5"):
        ClangFormatTool("clang-format-3.6").verify(ctx)
