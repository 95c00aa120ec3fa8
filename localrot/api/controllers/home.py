"""
Home Controller - serves the web frontend

Everything under PUBLIC_DIR is served from the site root, so the page's
relative asset links (style.css, app.js) resolve.
"""

import os
from flask import Blueprint, abort, current_app, request, send_from_directory

home_bp = Blueprint('home', __name__)

# Any method reaches the asset route so unmatched API calls still end in 404
ASSET_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE']


@home_bp.route('/', methods=['GET'])
def index():
    """Frontend entry page"""
    public_dir = current_app.config['PUBLIC_DIR']
    index_file = current_app.config['FRONTEND_INDEX']
    if not os.path.isfile(os.path.join(public_dir, index_file)):
        abort(404)
    return send_from_directory(public_dir, index_file)


@home_bp.route('/<path:filename>', methods=ASSET_METHODS)
def public_asset(filename):
    """Static assets next to the frontend page"""
    if request.method not in ('GET', 'HEAD'):
        abort(404)
    return send_from_directory(current_app.config['PUBLIC_DIR'], filename)
