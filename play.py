#!/usr/bin/env python3
"""
Bullet Dodge 啟動腳本
"""

from bullet_dodge.app import main

if __name__ == "__main__":
    print("=" * 60)
    print("Bullet Dodge")
    print("方向鍵/WASD 移動，空白鍵暫停，Enter 重新開始")
    print("=" * 60)
    main()
