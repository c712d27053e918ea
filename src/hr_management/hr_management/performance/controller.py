from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.performance_service

    @app.route("/api/performance", methods=["GET"], endpoint="list_reviews")
    @api_errors
    def list_reviews():
        reviews = service.list_reviews(request.args.get("employee_id"))
        return jsonify([r.to_dict() for r in reviews])

    @app.route("/api/performance", methods=["POST"], endpoint="create_review")
    @api_errors
    def create_review():
        data = json_body()
        review = service.create(
            employee_id=str(data.get("employee_id") or ""),
            quarter=data.get("quarter", ""),
            score=data.get("score"),
            review_date=data.get("review_date"),
            goals=data.get("goals", ""),
        )
        return jsonify(review.to_dict()), 201

    @app.route("/api/performance/<review_id>", methods=["PUT"], endpoint="update_review")
    @api_errors
    def update_review(review_id: str):
        return jsonify(service.update(review_id, json_body()).to_dict())

    @app.route("/api/performance/<review_id>", methods=["DELETE"], endpoint="delete_review")
    @api_errors
    def delete_review(review_id: str):
        service.delete(review_id)
        return jsonify({"success": True})
