# Load environment variables FIRST, before any module imports that need them
from dotenv import load_dotenv
load_dotenv()

from .app_factory import create_app
from .logging_config import setup_logging

# Configure logging at module load time
setup_logging()

app = create_app()
