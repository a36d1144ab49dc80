"""
tests/test_cli.py
=================

End-to-end tests for ``python -m patentterm.cli`` driven through main().
"""

import json

from patentterm.cli import main


def test_human_output(capsys):
    code = main(["--type", "utility", "--filing", "2020-01-01", "--grant", "2022-01-01",
                 "--as-of", "2025-01-01"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Patent Expiration Date" in out
    assert "January 1, 2040" in out
    assert "Term Basis: 20 years from filing date" in out
    assert "Time Remaining: 5478 days (15.0 years)" in out
    assert "Fee (3.5 years)" in out and "January 1, 2026" in out


def test_expired_output_hides_remaining_and_fees(capsys):
    main(["--filing", "1990-01-01", "--grant", "1993-01-01", "--as-of", "2025-01-01"])
    out = capsys.readouterr().out
    assert "Patent Has Expired" in out
    assert "Time Remaining" not in out
    assert "Maintenance Fee Deadlines" not in out


def test_json_output_with_disclaimer(capsys):
    code = main(["--filing", "2020-01-01", "--grant", "2022-01-01",
                 "--td-expiration", "2035-06-01", "--as-of", "2025-01-01", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["expirationDate"] == "2035-06-01"
    assert payload["termBasis"].endswith("(limited by terminal disclaimer)")
    assert payload["maintenanceFees"]["third"] == "2034-01-01"


def test_eefd_flag_implies_domestic_benefit(capsys):
    main(["--filing", "2020-01-01", "--grant", "2022-01-01", "--eefd", "2018-06-01",
          "--as-of", "2025-01-01", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["expirationDate"] == "2038-06-01"


def test_design_json_has_no_fees(capsys):
    main(["--type", "design", "--filing", "2014-01-01", "--grant", "2015-01-01",
          "--as-of", "2025-01-01", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["expirationDate"] == "2029-01-01"
    assert payload["maintenanceFees"] is None


def test_missing_grant_exits_2(capsys):
    code = main(["--filing", "2020-01-01"])
    assert code == 2
    assert "grant_date" in capsys.readouterr().err


def test_next_fee_is_marked(capsys):
    main(["--filing", "2020-01-01", "--grant", "2022-01-01", "--as-of", "2025-01-01"])
    lines = capsys.readouterr().out.splitlines()
    marked = [line for line in lines if "<- next" in line]
    assert len(marked) == 1
    assert "Fee (3.5 years)" in marked[0]
    assert marked[0].endswith("<- next (not yet open)")


def test_next_fee_in_grace_period(capsys):
    main(["--filing", "2020-01-01", "--grant", "2022-01-01", "--as-of", "2026-03-01"])
    out = capsys.readouterr().out
    assert "<- next (grace period)" in out


def test_date_past_calendar_end_exits_2(capsys):
    code = main(["--filing", "9990-01-01", "--grant", "9995-01-01", "--as-of", "2025-01-01"])
    assert code == 2
    assert "out of range" in capsys.readouterr().err
