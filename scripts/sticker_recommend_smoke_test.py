"""表情包推荐接口 smoke test。

1) 确保 Milvus 中已有表情包集合（可用 check_sticker_collection.py 检查）

2) 启动服务：
   python -m uvicorn app.main:app --host 127.0.0.1 --port 8001

3) 运行本脚本：
   python scripts/sticker_recommend_smoke_test.py [port]
"""

from __future__ import annotations

import json
import sys

import requests


PORT = int(sys.argv[1]) if len(sys.argv) > 1 else 8001
URL = f"http://127.0.0.1:{PORT}/api/v1/stickers/recommend"


def _pp(obj) -> None:
    print(json.dumps(obj, ensure_ascii=False, indent=2))


def _print_response(r: requests.Response) -> dict:
    print(f"[http] status={r.status_code}")
    try:
        payload = r.json()
    except Exception:
        text = (r.text or "").strip()
        print(text[:2000])
        raise
    _pp(payload)
    return payload


def main() -> None:
    print("\n[1] GET prompt=birthday cake")
    first = _print_response(requests.get(URL, params={"prompt": "birthday cake"}))

    print("\n[2] POST 排除上一步返回的第一个表情包")
    recent = []
    if first.get("success") and first.get("stickers"):
        recent.append(f"[sticker:{first['stickers'][0]['assetbundleName']}]")
    _print_response(
        requests.post(URL, json={"prompt": "birthday cake", "topK": 3, "excludeRecent": recent})
    )

    print("\n[3] POST 空 prompt（期望 400 INVALID_REQUEST）")
    _print_response(requests.post(URL, json={"prompt": ""}))

    print("\n[4] POST 非法 JSON（期望 400 INVALID_JSON）")
    _print_response(
        requests.post(URL, data="{not json", headers={"Content-Type": "application/json"})
    )

    print("\n[5] DELETE（期望 405 METHOD_NOT_ALLOWED）")
    _print_response(requests.delete(URL))


if __name__ == "__main__":
    main()
