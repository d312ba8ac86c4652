"""Ref Friendly Quests — Ref 퀘스트를 Arena 없이 완료 가능하게 하는 서버 모드"""
