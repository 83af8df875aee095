"""
Endpoint subpackage.

Each module defines an APIRouter for one domain (users, people).  The
routers are aggregated in ``router.py`` and then included by the app
factories in ``main.py``.
"""
