#!/usr/bin/env python3
"""
실행 중인 chat proxy에 메시지를 보내는 스모크 테스트 스크립트

Usage:
    python scripts/send_chat_message.py "Hello, Gemini" [--url http://localhost:8080]
"""

import argparse
import json

import httpx


def main():
    parser = argparse.ArgumentParser(description="proxy에 채팅 메시지 하나 전송")
    parser.add_argument("message", help="전송할 메시지")
    parser.add_argument("--url", default="http://localhost:8080/", help="proxy URL")
    parser.add_argument("--timeout", type=float, default=60.0, help="요청 타임아웃 (초)")
    args = parser.parse_args()

    print(f"📤 Health check: GET {args.url}")
    try:
        health = httpx.get(args.url, timeout=args.timeout)
        print(f"✅ Status Code: {health.status_code}")
    except httpx.HTTPError as e:
        print(f"❌ Health check failed: {e}")
        return

    print(f"📤 Sending message: POST {args.url}")
    try:
        response = httpx.post(args.url, json={"message": args.message}, timeout=args.timeout)
    except httpx.HTTPError as e:
        print(f"❌ Request failed: {e}")
        return

    print(f"✅ Status Code: {response.status_code}")
    try:
        print(f"Response:\n{json.dumps(response.json(), indent=2, ensure_ascii=False)}")
    except json.JSONDecodeError:
        print("❌ Response is not JSON:")
        print(response.text)


if __name__ == "__main__":
    main()
