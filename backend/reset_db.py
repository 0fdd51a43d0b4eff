#!/usr/bin/env python
"""データベースをリセットするスクリプト（全テーブルを削除して作り直す）"""
from app.database import engine, init_db

if __name__ == "__main__":
    print(f"{engine.url.render_as_string(hide_password=True)} のテーブルを作り直しています...")
    init_db(bind=engine, drop=True)
    print("データベースをリセットしました")
