"""
服務層

這個 package 包含純計算邏輯，不負責狀態：
- DoublesService：雙打隊伍抽籤
- NamingService：名稱正規化與 session 代碼生成
"""
