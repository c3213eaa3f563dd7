from __future__ import annotations

import argparse
import mimetypes

import requests


def main() -> None:
    p = argparse.ArgumentParser(description="Send one document to a running NewsDigest server")
    p.add_argument("--api", default="http://127.0.0.1:8000")
    p.add_argument("--file", help="text, PDF or image file to summarize")
    p.add_argument("--text", help="inline article text (used when --file is not given)")
    p.add_argument("--language", default="English")
    p.add_argument("--purpose", default="")
    p.add_argument("--style", default="")
    args = p.parse_args()

    data = {"language": args.language, "purpose": args.purpose, "style": args.style}
    if args.file:
        mime = mimetypes.guess_type(args.file)[0] or "application/octet-stream"
        with open(args.file, "rb") as f:
            r = requests.post(
                f"{args.api}/api/summarize",
                data=data,
                files={"file": (args.file, f, mime)},
                timeout=300,
            )
    else:
        data["text"] = args.text or ""
        r = requests.post(f"{args.api}/api/summarize", data=data, timeout=300)

    print("STATUS:", r.status_code)
    body = r.json()
    if r.ok:
        print("SUMMARY:\n" + body["summary"])
    else:
        print("ERROR:", body.get("code"), body.get("error"))


if __name__ == "__main__":
    main()
