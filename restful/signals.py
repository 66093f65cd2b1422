from blinker import Namespace

_restful = Namespace()

before_request = _restful.signal('before-request')

after_request = _restful.signal('after-request')

request_failed = _restful.signal('request-failed')
