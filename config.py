import os

# 기본 디렉토리 설정
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# 경로 설정
STATIC_DIR = os.path.join(BASE_DIR, "static")
LOG_FILE = os.path.join(BASE_DIR, "launch.log")

# 서버 설정
DEFAULT_HOST = os.getenv("HOST", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("PORT", "8000"))
DEFAULT_TIMEOUT = 15.0  # 서버 기동 대기 시간

# 문제 데이터 (Google Sheets CSV 내보내기)
QUIZ_SHEET_URL = os.getenv(
    "QUIZ_SHEET_URL",
    "https://docs.google.com/spreadsheets/d/1KFYsRXVVS-o_TDN2jifEKgG7wQbitWFQdZ4NHWUh8Ng"
    "/gviz/tq?tqx=out:csv&sheet=Sheet1",
)
FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", "10.0"))

# 점수 수집 엔드포인트 (Apps Script). 빈 문자열이면 전송하지 않음
SCORE_API_URL = os.getenv(
    "SCORE_API_URL",
    "https://script.google.com/macros/s/AKfycbxwekr4DrKOj5jGIWVzfgmaybovS4J6s9qFIPL_kd6dHv5SjkRLM2o632v9FjBJazLJ/exec",
)
REPORT_TIMEOUT = float(os.getenv("REPORT_TIMEOUT", "10.0"))

# 퀴즈 설정
QUESTIONS_PER_SESSION = int(os.getenv("QUESTIONS_PER_SESSION", "20"))
BLANK_PATTERN = r"_+"   # 빈칸 표시 (밑줄 1개 이상)
CSV_FIELDS = ("category", "question", "korean", "answer", "options", "explanation")
