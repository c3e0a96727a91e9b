"""
Tests for the move payment customization function.
"""

import json

import pytest

from apps.extensions.move_payment_customization import __main__ as function_main
from apps.extensions.move_payment_customization.api import RunInput
from apps.extensions.move_payment_customization.run import run, run_json

METHODS = [
    {"id": "gid://1", "name": "Credit Card"},
    {"id": "gid://2", "name": "Cash on Delivery (COD)"},
]


def make_input(config=None, amount="50.00", methods=None, raw_value=None):
    value = raw_value if raw_value is not None else (json.dumps(config) if config is not None else None)
    return RunInput.model_validate({
        "paymentCustomization": {"metafield": {"value": value} if value is not None else None},
        "cart": {"cost": {"totalAmount": {"amount": amount}}},
        "paymentMethods": METHODS if methods is None else methods,
    })


def operations(result):
    return result.model_dump()["operations"]


COD_CONFIG = {"paymentMethodName": "COD", "cartTotal": 100}


class TestScenarios:
    def test_moves_matching_method_below_threshold(self):
        result = run(make_input(COD_CONFIG, amount="50.00"))
        assert operations(result) == [{"move": {"index": 0, "paymentMethodId": "gid://2"}}]

    def test_no_move_above_threshold(self):
        assert operations(run(make_input(COD_CONFIG, amount="150.00"))) == []

    def test_empty_configuration(self):
        assert operations(run(make_input(raw_value="{}"))) == []

    def test_total_equal_to_threshold_still_moves(self):
        result = run(make_input(COD_CONFIG, amount="100.00"))
        assert operations(result) == [{"move": {"index": 0, "paymentMethodId": "gid://2"}}]


class TestDecisions:
    @pytest.mark.parametrize("config", [
        {"paymentMethodName": "", "cartTotal": 100},
        {"paymentMethodName": "COD", "cartTotal": 0},
        {"cartTotal": 100},
        {"paymentMethodName": "COD"},
    ])
    def test_unusable_configuration(self, config):
        assert operations(run(make_input(config))) == []

    @pytest.mark.parametrize("raw_value, amount", [
        ('{"paymentMethodName": "COD", "cartTotal": "0"}', "0.00"),
        ('{"paymentMethodName": "COD", "cartTotal": "0.00"}', "0.00"),
        ('{"paymentMethodName": "COD", "cartTotal": Infinity}', "999999.00"),
    ])
    def test_degenerate_threshold_never_moves(self, raw_value, amount):
        assert operations(run(make_input(raw_value=raw_value, amount=amount))) == []

    def test_missing_metafield(self):
        assert operations(run(make_input())) == []

    def test_missing_payment_customization(self):
        data = RunInput.model_validate({
            "cart": {"cost": {"totalAmount": {"amount": "10.00"}}},
            "paymentMethods": METHODS,
        })
        assert operations(run(data)) == []

    def test_malformed_metafield_json(self):
        assert operations(run(make_input(raw_value="{not json"))) == []

    def test_no_matching_method(self):
        config = {"paymentMethodName": "PayPal", "cartTotal": 100}
        assert operations(run(make_input(config))) == []

    def test_match_is_case_sensitive(self):
        config = {"paymentMethodName": "cod", "cartTotal": 100}
        assert operations(run(make_input(config))) == []

    def test_first_match_wins(self):
        methods = [
            {"id": "gid://a", "name": "Gift card"},
            {"id": "gid://b", "name": "COD express"},
            {"id": "gid://c", "name": "COD standard"},
        ]
        result = run(make_input(COD_CONFIG, methods=methods))
        assert operations(result) == [{"move": {"index": 0, "paymentMethodId": "gid://b"}}]

    def test_partial_name_matches(self):
        config = {"paymentMethodName": "Cash on Delivery", "cartTotal": 100}
        result = run(make_input(config))
        assert operations(result) == [{"move": {"index": 0, "paymentMethodId": "gid://2"}}]

    def test_empty_payment_methods(self):
        assert operations(run(make_input(COD_CONFIG, methods=[]))) == []

    @pytest.mark.parametrize("amount", [None, "", "abc", "nan"])
    def test_unparseable_total_defaults_to_zero(self, amount):
        result = run(make_input(COD_CONFIG, amount=amount))
        assert operations(result) == [{"move": {"index": 0, "paymentMethodId": "gid://2"}}]

    def test_idempotent(self):
        data = make_input(COD_CONFIG)
        assert run(data) == run(data)

    def test_input_not_mutated(self):
        data = make_input(COD_CONFIG)
        before = data.model_dump()
        run(data)
        assert data.model_dump() == before

    def test_results_are_independent(self):
        first = run(make_input(raw_value="{}"))
        first.operations.append("x")
        assert operations(run(make_input(raw_value="{}"))) == []


class TestSerializedInvocation:
    def test_run_json(self):
        raw = json.dumps({
            "paymentCustomization": {"metafield": {"value": json.dumps(COD_CONFIG)}},
            "cart": {"cost": {"totalAmount": {"amount": "20.00"}}},
            "paymentMethods": METHODS,
        })
        assert json.loads(run_json(raw)) == {
            "operations": [{"move": {"index": 0, "paymentMethodId": "gid://2"}}]
        }

    def test_main_reads_stdin_writes_stdout(self, monkeypatch, capsys):
        import io

        raw = json.dumps({
            "paymentCustomization": None,
            "cart": {"cost": {"totalAmount": {"amount": "20.00"}}},
            "paymentMethods": METHODS,
        })
        monkeypatch.setattr("sys.stdin", io.StringIO(raw))

        assert function_main.main() == 0
        assert json.loads(capsys.readouterr().out) == {"operations": []}
