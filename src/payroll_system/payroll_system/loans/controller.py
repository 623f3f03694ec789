from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint, optional_int_arg
from ..container import Container

_UPDATABLE = ("employee_id", "principal", "installment_amount", "remaining", "start_date", "end_date", "status")


def register(app: Flask, container: Container) -> None:
    service = container.loan_service

    @app.route("/api/loans", methods=["GET"], endpoint="loans_list")
    @json_endpoint
    def loans_list():
        loans = service.list_loans(employee_id=optional_int_arg("employee_id"))
        return jsonify([loan.to_dict() for loan in loans])

    @app.route("/api/loans/<int:loan_id>", methods=["GET"], endpoint="loans_get")
    @json_endpoint
    def loans_get(loan_id: int):
        return jsonify(service.get_loan(loan_id).to_dict())

    @app.route("/api/loans", methods=["POST"], endpoint="loans_create")
    @json_endpoint
    def loans_create():
        data = json_body()
        loan = service.create_loan(
            employee_id=data.get("employee_id"),
            principal=data.get("principal"),
            installment_amount=data.get("installment_amount"),
            start_date=data.get("start_date"),
            end_date=data.get("end_date"),
            remaining=data.get("remaining"),
            status=data.get("status") or "active",
        )
        return jsonify(loan.to_dict()), 201

    @app.route("/api/loans/<int:loan_id>", methods=["PUT"], endpoint="loans_update")
    @json_endpoint
    def loans_update(loan_id: int):
        data = json_body()
        loan = service.update_loan(loan_id, **{k: data.get(k) for k in _UPDATABLE})
        return jsonify(loan.to_dict())

    @app.route("/api/loans/<int:loan_id>", methods=["DELETE"], endpoint="loans_delete")
    @json_endpoint
    def loans_delete(loan_id: int):
        service.delete_loan(loan_id)
        return jsonify({"message": "Loan deleted successfully"})
