import threading
from unittest import IsolatedAsyncioTestCase

import requests
from flask import Flask, jsonify, request
from werkzeug.serving import make_server


def create_mock_app():
    app = Flask(__name__)

    @app.route('/api/hello-world')
    def hello_world():
        return jsonify('Hello, World!')

    @app.route('/api/echo', methods=['POST'])
    def echo():
        return jsonify(request.get_json())

    @app.route('/api/foo/<int:id>')
    def read_foo(id):
        return jsonify({'id': id, 'name': 'Foo {}'.format(id)})

    @app.route('/api/foo', methods=['POST'])
    def create_foo():
        return jsonify(request.get_json())

    @app.route('/api/foo/<int:id>', methods=['PUT'])
    def update_foo(id):
        return jsonify(dict(request.get_json(), id=id))

    @app.route('/api/foo/<int:id>/name', methods=['PUT'])
    def update_foo_name(id):
        return jsonify({'id': id, 'name': request.get_json()['value']})

    @app.route('/api/foo/<int:id>', methods=['DELETE'])
    def destroy_foo(id):
        return '', 204

    @app.route('/api/bar')
    def bar():
        return jsonify(request.args.to_dict(flat=False))

    @app.route('/api/headers')
    def headers():
        return jsonify({key.lower(): value for key, value in request.headers.items()})

    @app.route('/api/morphing')
    def morphing():
        return jsonify({'msg': 'Hello, {}!'.format(request.args.get('a', 'World'))})

    @app.route('/api/missing')
    def missing():
        return 'There is nothing here', 404

    return app


class LiveServer(object):

    def __init__(self, app):
        self.server = make_server('127.0.0.1', 0, app)
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)

    @property
    def url(self):
        return 'http://127.0.0.1:{}'.format(self.server.server_port)

    def start(self):
        self.thread.start()

    def stop(self):
        self.server.shutdown()
        self.thread.join()


class LiveServerTestCase(IsolatedAsyncioTestCase):

    @classmethod
    def setUpClass(cls):
        super(LiveServerTestCase, cls).setUpClass()
        cls.live_server = LiveServer(create_mock_app())
        cls.live_server.start()

    @classmethod
    def tearDownClass(cls):
        cls.live_server.stop()
        super(LiveServerTestCase, cls).tearDownClass()


class RecordingRequester(object):
    """Requester that records each request and answers with a fixed result."""

    def __init__(self, result=None, exception=None):
        self.requests = []
        self.result = result
        self.exception = exception

    async def __call__(self, request):
        self.requests.append(request)
        if self.exception is not None:
            raise self.exception
        return self.result

    @property
    def last(self):
        return self.requests[-1]


class FakeSession(object):
    """Stands in for :class:`requests.Session`, answering every request with one canned response."""

    def __init__(self, status_code=200, content=b'null', reason='OK'):
        self.calls = []
        self.status_code = status_code
        self.content = content
        self.reason = reason

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        response = requests.Response()
        response.status_code = self.status_code
        response.reason = self.reason
        response.url = url
        response._content = self.content
        response.encoding = 'utf-8'
        return response

    def close(self):
        pass

    @property
    def last(self):
        return self.calls[-1]
