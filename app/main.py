from dotenv import load_dotenv

load_dotenv()

from server import server  # noqa: E402

server_app = server.create_app()
