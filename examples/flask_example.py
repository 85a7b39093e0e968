"""
Flask integration example for rekey.

The middleware wraps ``app.wsgi_app``, so Flask sees the rewritten body in
``request.get_json()``.

Run with:
    flask --app examples.flask_example run
"""

from flask import Flask, jsonify, request

from rekey.config import RekeyConfig, RenameConfig
from rekey.integration.wsgi import create_flask_app

app = Flask(__name__)


@app.route("/orders", methods=["POST"])
def create_order():
    data = request.get_json(silent=True)
    return jsonify({"received": data, "content_length": request.content_length})


create_flask_app(
    app,
    config=RekeyConfig(
        name="legacy-order-ref",
        rename=RenameConfig(old_key="orderRef", new_key="order_reference"),
    ),
)

if __name__ == "__main__":
    app.run(debug=True)
