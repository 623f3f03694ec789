from __future__ import annotations

from flask import Flask, jsonify, request, send_file

from ..common.http import json_body, json_endpoint, optional_int_arg
from ..container import Container
from .export import salary_register_xlsx


def register(app: Flask, container: Container) -> None:
    service = container.salary_service

    @app.route("/api/salaries", methods=["GET"], endpoint="salaries_list")
    @json_endpoint
    def salaries_list():
        records = service.list_salary_records(
            employee_id=optional_int_arg("employee_id"),
            month=(request.args.get("month") or "").strip() or None,
        )
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/salaries/summary", methods=["GET"], endpoint="salaries_summary")
    @json_endpoint
    def salaries_summary():
        return jsonify(service.payables_summary().to_dict())

    @app.route("/api/salaries/export", methods=["GET"], endpoint="salaries_export")
    @json_endpoint
    def salaries_export():
        month = (request.args.get("month") or "").strip() or None
        records = service.list_salary_records(employee_id=optional_int_arg("employee_id"), month=month)
        return send_file(
            salary_register_xlsx(records),
            download_name=f"salary-register-{month or 'all'}.xlsx",
            as_attachment=True,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )

    @app.route("/api/salaries/<int:salary_id>", methods=["GET"], endpoint="salaries_get")
    @json_endpoint
    def salaries_get(salary_id: int):
        return jsonify(service.get_salary_record(salary_id).to_dict())

    @app.route("/api/salaries", methods=["POST"], endpoint="salaries_create")
    @json_endpoint
    def salaries_create():
        data = json_body()
        record = service.create_salary_record(
            employee_id=data.get("employee_id"),
            month=data.get("month"),
            basic_salary=data.get("basic_salary"),
            allowances=data.get("allowances", 0),
        )
        return jsonify(record.to_dict()), 201

    @app.route("/api/salaries/<int:salary_id>", methods=["PUT"], endpoint="salaries_update")
    @json_endpoint
    def salaries_update(salary_id: int):
        data = json_body()
        record = service.update_salary_record(
            salary_id,
            employee_id=data.get("employee_id"),
            month=data.get("month"),
            basic_salary=data.get("basic_salary"),
            allowances=data.get("allowances"),
            payment_status=data.get("payment_status"),
        )
        return jsonify(record.to_dict())

    @app.route("/api/salaries/<int:salary_id>", methods=["DELETE"], endpoint="salaries_delete")
    @json_endpoint
    def salaries_delete(salary_id: int):
        service.delete_salary_record(salary_id)
        return jsonify({"message": "Salary record deleted successfully"})
