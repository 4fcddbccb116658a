# config.py
import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

load_dotenv()

class Config:
    BIBLE_DATA_PATH = os.getenv('BIBLE_DATA_PATH', os.path.join(BASE_DIR, 'bible_data.json'))
    VERSES_PER_PAGE = int(os.getenv('VERSES_PER_PAGE', 10))
    SEARCH_RESULT_LIMIT = int(os.getenv('SEARCH_RESULT_LIMIT', 50))  # Matches the reader's result list
    MAX_SEARCH_RESULT_LIMIT = int(os.getenv('MAX_SEARCH_RESULT_LIMIT', 500))
    PORT = int(os.getenv('PORT', 5001))
