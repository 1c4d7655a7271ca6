"""
Flask JSON API for the campus cafe presentation layer
"""
from functools import wraps
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, session

from config import Settings
from core.cafe import CampusCafe
from logging_config import setup_logging, get_logger

log = get_logger(__name__)

ERROR_STATUS_CODES = {
    "validation": 400,
    "authentication": 401,
    "not_found": 404,
    "invalid_transition": 409,
    "storage": 500,
}


def respond(result: Dict[str, Any], success_code: int = 200):
    # 서비스 결과 딕셔너리를 HTTP 응답으로 변환
    if result.get("success"):
        return jsonify(result), success_code
    return jsonify(result), ERROR_STATUS_CODES.get(result.get("error_type"), 400)


def current_user() -> Optional[Dict[str, Any]]:
    return session.get("user")


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_user() is None:
            return jsonify({"success": False, "error": "Please log in first"}), 401
        return view(*args, **kwargs)
    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        user = current_user()
        if user is None:
            return jsonify({"success": False, "error": "Please log in first"}), 401
        if user.get("role") != "admin":
            return jsonify({"success": False, "error": "Admin access required"}), 403
        return view(*args, **kwargs)
    return wrapper


def create_app(cafe: Optional[CampusCafe] = None, settings: Optional[Settings] = None) -> Flask:
    """Build the Flask application around a CampusCafe instance"""
    settings = settings or (cafe.settings if cafe else Settings.from_env())
    cafe = cafe or CampusCafe(settings)

    app = Flask(__name__)
    app.secret_key = settings.secret_key
    app.config["CAFE"] = cafe

    def body() -> Dict[str, Any]:
        # JSON 객체가 아니면 빈 요청으로 취급
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    # === 인증 ===
    @app.route('/api/login', methods=['POST'])
    def login():
        """Log in as a student or the admin"""
        result = cafe.login(body())
        if result["success"]:
            session["user"] = result["user"]
        return respond(result)

    @app.route('/api/logout', methods=['POST'])
    def logout():
        """Clear the login session"""
        session.clear()
        return jsonify({"success": True, "message": "Logged out"})

    @app.route('/api/me')
    @login_required
    def me():
        return jsonify({"success": True, "user": current_user()})

    # === 메뉴 ===
    @app.route('/api/menu')
    def list_menu():
        """List menu items; ?available=true hides unavailable ones"""
        available_only = request.args.get("available", "false").lower() == "true"
        return respond(cafe.list_menu(available_only))

    @app.route('/api/menu', methods=['POST'])
    @admin_required
    def add_menu_item():
        data = body()
        result = cafe.add_menu_item(
            name=data.get("name", ""),
            price=data.get("price"),
            description=data.get("description", ""),
            category=data.get("category", "coffee"),
            available=data.get("available", True),
            image=data.get("image")
        )
        return respond(result, 201)

    @app.route('/api/menu/<item_id>', methods=['PATCH'])
    @admin_required
    def update_menu_item(item_id):
        return respond(cafe.update_menu_item(item_id, body()))

    @app.route('/api/menu/<item_id>/toggle', methods=['POST'])
    @admin_required
    def toggle_menu_item(item_id):
        return respond(cafe.toggle_availability(item_id))

    @app.route('/api/menu/<item_id>', methods=['DELETE'])
    @admin_required
    def delete_menu_item(item_id):
        return respond(cafe.delete_menu_item(item_id))

    # === 장바구니 (로그인 사용자별) ===
    @app.route('/api/cart')
    @login_required
    def get_cart():
        return respond(cafe.get_cart_details(current_user()["id"]))

    @app.route('/api/cart', methods=['POST'])
    @login_required
    def add_to_cart():
        data = body()
        try:
            quantity = int(data.get("quantity", 1))
        except (TypeError, ValueError):
            return jsonify({"success": False, "error": "Quantity must be a number"}), 400
        return respond(cafe.add_to_cart(current_user()["id"], str(data.get("menu_item_id", "")), quantity))

    @app.route('/api/cart/<item_id>', methods=['PATCH'])
    @login_required
    def update_cart_item(item_id):
        try:
            quantity = int(body().get("quantity"))
        except (TypeError, ValueError):
            return jsonify({"success": False, "error": "Quantity must be a number"}), 400
        return respond(cafe.update_cart_quantity(current_user()["id"], item_id, quantity))

    @app.route('/api/cart', methods=['DELETE'])
    @login_required
    def clear_cart():
        return respond(cafe.clear_cart(current_user()["id"]))

    # === 주문 ===
    @app.route('/api/orders')
    @login_required
    def list_orders():
        """Admins see every order, students only their own"""
        user = current_user()
        if user["role"] == "admin":
            return respond(cafe.list_orders())
        return respond(cafe.list_customer_orders(user["id"]))

    @app.route('/api/orders', methods=['POST'])
    @login_required
    def place_order():
        data = body()
        user = current_user()
        result = cafe.place_order(
            session_id=user["id"],
            customer_id=user["id"],
            customer_name=data.get("customer_name", ""),
            customer_contact=data.get("customer_contact", "")
        )
        return respond(result, 201)

    @app.route('/api/orders/stats')
    @admin_required
    def order_stats():
        return respond(cafe.get_order_stats())

    @app.route('/api/orders/<order_id>')
    @login_required
    def get_order(order_id):
        user = current_user()
        result = cafe.get_order(order_id)
        if result["success"] and user["role"] != "admin" and result["order"]["customer_id"] != user["id"]:
            return jsonify({"success": False, "error": "Order not found"}), 404
        return respond(result)

    @app.route('/api/orders/<order_id>', methods=['PATCH'])
    @admin_required
    def update_order_status(order_id):
        return respond(cafe.update_order_status(order_id, body().get("status", "")))

    @app.route('/api/orders/<order_id>/advance', methods=['POST'])
    @admin_required
    def advance_order(order_id):
        return respond(cafe.advance_order(order_id))

    @app.route('/api/orders/<order_id>/cancel', methods=['POST'])
    @admin_required
    def cancel_order(order_id):
        return respond(cafe.cancel_order(order_id))

    @app.route('/health')
    def health():
        """Health check endpoint"""
        return jsonify({'status': 'ok', 'message': 'Campus cafe is running!'})

    return app


if __name__ == '__main__':
    settings = Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)

    log.info("=== Campus Cafe Server ===")
    log.info("Starting server on http://localhost:%s", settings.port)

    create_app(settings=settings).run(
        host='0.0.0.0',
        port=settings.port,
        debug=settings.debug
    )
