from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=['home'])

HOME_PAGE = """<h1>Exchange Rates API</h1>
      End-Point : <code><a href="/api">/api</a></code>"""


@router.get('/', response_class=HTMLResponse, summary='API information')
async def home() -> str:
	return HOME_PAGE
