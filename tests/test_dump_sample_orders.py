"""Tests for the sample-order dump script."""

import json

import pytest

from scripts.dump_sample_orders import main


def test_dumps_orders_and_metrics(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--today", "2024-06-15"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["today"] == "2024-06-15"
    assert [o["order_number"] for o in payload["orders"]] == list(range(1001, 1011))
    assert set(payload["metrics"]) == {
        "placed_orders_today",
        "average_7_day_placed_orders",
        "completed_orders",
        "red_lights",
    }


def test_output_is_stable(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--today", "2024-06-15"])
    first = capsys.readouterr().out
    main(["--today", "2024-06-15"])

    assert capsys.readouterr().out == first


def test_rejects_bad_date() -> None:
    with pytest.raises(SystemExit):
        main(["--today", "15/06/2024"])
