"""
config.py - ロギング設定・アプリ定数
Caesar Cipher v1.0
"""

import os

# ---------------------------------------------------------------------------
# ロギング
# ---------------------------------------------------------------------------

LOG_LEVEL = os.environ.get("CAESAR_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ---------------------------------------------------------------------------
# アプリ定数
# ---------------------------------------------------------------------------

APP_TITLE = "Caesar Cipher"
APP_VERSION = "1.0.0"
WINDOW_WIDTH = 750
WINDOW_HEIGHT = 660

DEFAULT_SHIFT = 6
SHIFT_MIN = 1
SHIFT_MAX = 25

# ---------------------------------------------------------------------------
# カラーパレット
# ---------------------------------------------------------------------------

COLOR_PLAINTEXT = "#00B3B3"  # ティール
COLOR_CIPHERTEXT = "#E60074"  # マゼンタ
COLOR_BG = "#F0F2F5"  # 非常に薄いグレー（背景）
COLOR_SIDEBAR = "#E4E7EB"  # サイドバー背景
COLOR_CARD = "#FFFFFF"  # 入力欄背景
COLOR_READONLY = "#F6F8FA"  # 出力欄背景
COLOR_BORDER = "#D0D7DE"  # ボーダー
COLOR_TEXT_MUTED = "#656D76"  # 薄いテキスト
COLOR_TEXT_MAIN = "#1F2328"  # メインテキスト
COLOR_PRIMARY = "#0969DA"  # プライマリ（青）

# UI 定数
BORDER_RADIUS_BTN = 6
SIDEBAR_WIDTH = 220
TEXT_PANEL_HEIGHT = 250
