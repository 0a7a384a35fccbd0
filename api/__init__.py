"""
API 層

FastAPI routers，只負責 HTTP 與領域異常之間的轉換：
- sessions：Session 的建立、查詢、刪除
- players：名單的加入、移除
- doubles：抽籤
"""
