"""Bullet Dodge - 彈幕閃避生存遊戲"""

__version__ = "0.1.0"
