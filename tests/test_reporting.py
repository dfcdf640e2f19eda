# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

from resource_codegen.model import Diagnostic, Severity
from resource_codegen.reporting import Reporter, RichReporter, make_reporter


def _warning():
    return Diagnostic(
        id="RESGEN002",
        title="Warning",
        severity=Severity.WARNING,
        message="odd resource",
    )


def test_quiet_level_keeps_errors_and_warnings(capsys):
    rep = Reporter(verbosity=0, color_mode="never")
    rep.diagnostic(_warning())
    rep.diagnostic(Diagnostic.log("trace line"))
    rep.error("broken")
    err = capsys.readouterr().err
    assert "[WARN] RESGEN002: odd resource" in err
    assert "[ERROR] broken" in err
    assert "trace line" not in err


def test_error_trace_only_at_debug_level(capsys):
    try:
        raise KeyError("x")
    except KeyError as e:
        d = Diagnostic.from_exception(e)

    Reporter(verbosity=1, color_mode="never").diagnostic(d)
    err = capsys.readouterr().err
    assert "[ERROR] RESGEN001: Exception ''x'' KeyError" in err
    assert "Traceback" not in err

    Reporter(verbosity=3, color_mode="never").diagnostic(d)
    err = capsys.readouterr().err
    assert "[DBG] Traceback" in err


def test_info_diagnostics_at_normal_level(capsys):
    Reporter(verbosity=1, color_mode="never").diagnostic(Diagnostic.log("hello"))
    assert "[INFO] RESGENLOG: hello" in capsys.readouterr().err


def test_no_color_env_disables_ansi(monkeypatch, capsys):
    monkeypatch.setenv("NO_COLOR", "1")
    Reporter(verbosity=1).info("plain")
    assert capsys.readouterr().err == "[INFO] plain\n"


def test_make_reporter_kinds():
    assert type(make_reporter("plain")) is Reporter
    rich = make_reporter("rich", verbosity=2, color_mode="never")
    assert isinstance(rich, RichReporter)
    assert rich.verbosity == 2
