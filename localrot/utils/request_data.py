from flask import request


def get_request_data():
    """Request body as a dict: the JSON payload when there is one, else the form fields"""
    data = request.get_json(silent=True)
    if data is not None:
        return data
    return request.form.to_dict()
