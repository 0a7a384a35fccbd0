"""
核心業務邏輯層

這個 package 包含所有核心業務邏輯，包括：
- Roster：玩家名單與它的不變條件
- SessionManager：管理 DrawSession 的生命週期
- Exceptions：集中定義所有領域異常
"""
