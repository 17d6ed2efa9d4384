"""リリース成果物の管理ツール"""
