# Minimal pod greeter - answers every request with the pod's host name
import logging
import socket

from flask import Flask, Response

HOST = '0.0.0.0'
PORT = 8080
GREETING = 'Hello from Pod: {hostname}\n'

# Every method answered by the same view (OPTIONS included, see below)
HTTP_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS', 'TRACE']

logger = logging.getLogger('hello-pod')

app = Flask(__name__)
# '/a//b' must reach the view instead of redirecting to '/a/b'
app.url_map.merge_slashes = False


def get_hostname():
    """Host name reported by the OS, or an empty string if the lookup fails"""
    try:
        return socket.gethostname()
    except OSError as e:
        logger.debug('host name lookup failed: %s', e)
        return ''


def greeting(hostname):
    return GREETING.format(hostname=hostname)


# Method and path are not discriminated: '/' and anything below it share one view
@app.route('/', defaults={'path': ''}, methods=HTTP_METHODS, provide_automatic_options=False)
@app.route('/<path:path>', methods=HTTP_METHODS, provide_automatic_options=False)
def hello(path):
    return Response(greeting(get_hostname()), status=200, mimetype='text/plain')


# Paths the converter can't match and non-standard methods still get the greeting
@app.errorhandler(404)
@app.errorhandler(405)
def hello_fallback(e):
    return hello('')


def start(host=HOST, port=PORT):
    """Bind the listener and serve forever; an unbindable port exits the process"""
    logger.info('Pod greeter listening on %s:%d', host, port)
    app.run(host=host, port=port, threaded=True)


def main():
    logging.basicConfig(level=logging.INFO, format='[%(asctime)s] %(levelname)s - %(message)s')
    start()


if __name__ == '__main__':
    main()
