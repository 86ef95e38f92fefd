from mangum import Mangum

from todos_api.main import app

handler = Mangum(app)
