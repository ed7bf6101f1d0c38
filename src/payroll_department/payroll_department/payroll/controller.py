from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.parsing import (
    check_base_pay,
    check_bonus_percent,
    parse_base_pay,
    parse_bonus_percent,
    require_non_empty,
)
from ..container import Container
from ..core.exceptions import DuplicateWorkTypeError, EmptyWorkListError, InvalidRateError, ValidationError


def register(app: Flask, container: Container) -> None:
    registry = container.registry

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _payload() -> dict:
        if not request.is_json:
            return request.form.to_dict()

        data = request.get_json(silent=True)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def _amount(value, parse, check) -> float:
        # JSON numbers skip the text syntax rules; bool is not a number here
        if isinstance(value, bool):
            raise ValidationError("Amounts must be numbers")
        if isinstance(value, (int, float)):
            return check(value)
        return parse("" if value is None else str(value))

    @app.route("/api/work-types", methods=["GET"], endpoint="list_work_types")
    def list_work_types():
        listing = registry.list_all()
        return jsonify({"empty": listing.is_empty, "items": [row.as_dict() for row in listing]})

    @app.route("/api/work-types", methods=["POST"], endpoint="add_work_type")
    def add_work_type():
        try:
            data = _payload()
            name = require_non_empty(str(data.get("name") or ""), "Work type name")
            base_pay = _amount(data.get("base_pay"), parse_base_pay, check_base_pay)

            bonus_raw = data.get("bonus_percent")
            if bonus_raw is None or (isinstance(bonus_raw, str) and not bonus_raw.strip()):
                bonus_percent = 0.0
            else:
                bonus_percent = _amount(bonus_raw, parse_bonus_percent, check_bonus_percent)

            work_type = registry.add_work_type(name, base_pay, bonus_percent)
        except (ValidationError, InvalidRateError) as e:
            return _error(str(e), 400)
        except DuplicateWorkTypeError as e:
            return _error(str(e), 409)

        item = {"name": work_type.name, "base_pay": work_type.base_pay, "final_pay": work_type.final_pay}
        return jsonify({"success": True, "item": item}), 201

    @app.route("/api/work-types/average", methods=["GET"], endpoint="average_pay")
    def average_pay():
        try:
            avg = registry.calculate_average_pay()
        except EmptyWorkListError as e:
            return _error(str(e), 404)
        return jsonify({"average": avg, "display": f"{avg:.{container.average_precision}f}"})
