# app.py
from flask import Flask, jsonify, request, g
from flask_cors import CORS
from routes.bible import bible_bp
from config import Config
from utils.loader import build_index
import logging
import time
import sys
from werkzeug.middleware.proxy_fix import ProxyFix

# Configure logging to output to stdout
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def create_app(config=None, index=None):
    """Build the Flask app around one VerseIndex.

    The corpus is loaded once from BIBLE_DATA_PATH unless an index is
    passed in. A corpus that cannot be loaded stops startup.
    """
    app = Flask(__name__)
    app.config.from_object(config or Config)

    # Use ProxyFix to handle proxy headers properly
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    app.json.sort_keys = False  # Preserve order of keys in JSON responses
    app.json.compact = True

    # Configure CORS to allow requests from any origin
    CORS(app, resources={
        r"/api/*": {
            "origins": "*",
            "methods": ["GET", "POST", "OPTIONS"],
            "allow_headers": ["Content-Type"]
        }
    })

    app.url_map.strict_slashes = False

    if index is None:
        logger.info(f"Loading Bible data from {app.config['BIBLE_DATA_PATH']}...")
        index = build_index(app.config['BIBLE_DATA_PATH'])
        logger.info(f"Bible data indexed: {len(index)} books")
    app.extensions['verse_index'] = index

    app.register_blueprint(bible_bp, url_prefix='/api/bible')

    @app.before_request
    def before_request():
        g.start_time = time.time()

    @app.after_request
    def after_request(response):
        duration = time.time() - g.get('start_time', time.time())
        logger.info(f"Request to {request.path} took {duration:.2f} seconds")
        return response

    @app.route('/health', methods=['GET'])
    def health():
        """Health check endpoint that also reports the loaded corpus"""
        return jsonify({
            'status': 'healthy',
            'books': len(app.extensions['verse_index']),
            'timestamp': time.time()
        })

    return app


if __name__ == '__main__':
    print("Starting Flask server...")
    app = create_app()
    app.run(debug=True, port=Config.PORT)
