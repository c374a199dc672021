"""WSGI entry point.

WSGI 서버 설정에서 이 파일을 import합니다:

    import sys
    path = '/home/USERNAME/restock'
    if path not in sys.path:
        sys.path.insert(0, path)
    from wsgi import application
"""

from restock.web.app import create_app

application = create_app()
