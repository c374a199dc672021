"""웹 API (Flask)"""
