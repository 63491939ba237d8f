"""語言別名資料 (目前提供英文)"""
