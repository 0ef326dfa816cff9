#!/usr/bin/env python3
"""
Prompt Architect v1.0 - Prompt analysis & model-aware rewriting

ARCHITECTURE:
├── core/           # CORE LOGIC
│   ├── patterns.py      # Pattern tables
│   ├── detector.py      # Component detection
│   ├── analyzer.py      # Score + altitude
│   ├── advisor.py       # Follow-up questions
│   ├── heuristics.py    # Quick 0-10 score
│   ├── optimizer.py     # Rewrite pipeline
│   └── composer.py      # Answers -> sectioned prompt
├── engine/         # SUPPORT
│   └── tokens.py        # Token estimation
├── connectors/     # INTERFACES
│   ├── adapters.py      # claude / gpt / gemini polish
│   └── service_client.py
└── service/        # HTTP API (FastAPI)
"""

import sys
import json

COMMANDS = ("analyze", "score", "questions", "tokens", "optimize", "serve", "status")

USAGE = """
Prompt Architect v{} - Prompt analysis & model-aware rewriting

ANALYSIS:
  promptarchitect analyze "<prompt>"          Score, altitude, components
  promptarchitect score "<prompt>"            Quick 0-10 score
  promptarchitect questions "<prompt>"        Follow-up questions
  promptarchitect tokens "<text>" [--model m] Token estimate

REWRITE:
  promptarchitect optimize "<prompt>" [--model claude|gpt|gemini]
                  [--level low|medium|high] [--style markdown|json|bullets|prose]
                  [--enable k1,k2] [--disable k1,k2]

SERVICE:
  promptarchitect serve [port]                Start HTTP API (foreground)
  promptarchitect status [url]                Check a running service

OPTIONS:
  --json          Print raw JSON
  --remote URL    Send analyze/optimize/questions to a running service
"""


def _usage():
    from promptarchitect import config
    return USAGE.format(config.VERSION)


def _get_option(args, name, default=None):
    if name in args:
        idx = args.index(name)
        if idx + 1 < len(args):
            return args[idx + 1]
    return default


def _key_list(value):
    return [k.strip() for k in value.split(",") if k.strip()] if value else []


def _print_report(report: dict):
    print(f"\nScore: {report['score']}/100")
    print(f"Altitude: {report['altitude'].upper()}")
    print(f"Words: {report['wordCount']}")
    print("\nComponents:")
    for key, data in report["components"].items():
        mark = "✓" if data["present"] else "○"
        hits = f"  ({', '.join(data['matches'][:3])})" if data["matches"] else ""
        print(f"  {mark} {key.capitalize()}{hits}")


def _print_optimization(payload: dict):
    result = payload["result"]
    metrics = result["metrics"]
    print(result["optimized"])
    print("\n---")
    print(f"Techniques: {', '.join(result['techniques']) or 'none'}")
    print(f"Tokens: {metrics['originalTokens']} -> {metrics['optimizedTokens']} "
          f"(efficiency {metrics['efficiency']}%)")


def main():
    args = sys.argv[1:]

    if not args:
        print(_usage())
        return

    cmd = args[0]
    if cmd not in COMMANDS:
        print(f"Unknown command: {cmd}")
        print(_usage())
        sys.exit(1)

    as_json = "--json" in args
    remote = _get_option(args, "--remote")

    # ========== SERVICE COMMANDS ==========
    if cmd == "serve":
        from promptarchitect.service import server
        if len(args) > 1 and args[1].isdigit():
            server.PORT = int(args[1])
        server.run()
        return

    elif cmd == "status":
        from promptarchitect.connectors.service_client import ServiceClient
        url = args[1] if len(args) > 1 and not args[1].startswith("-") else None
        client = ServiceClient(url, timeout=1)
        if client.is_online():
            print(f"✅ Online: {client.base_url} (v{client.health().get('version', '?')})")
        else:
            print(f"❌ Offline: {client.base_url}")
            sys.exit(1)
        return

    # ========== PROMPT COMMANDS ==========
    if len(args) < 2 or args[1].startswith("--"):
        print(f"Usage: promptarchitect {cmd} \"<prompt>\"")
        sys.exit(1)
    prompt = args[1]

    from promptarchitect.validation_utils import Validator, ValidationError
    from promptarchitect.connectors.service_client import ServiceClient, ServiceUnavailable

    try:
        if cmd == "score":
            from promptarchitect.core.heuristics import calculate_quick_score, get_score_feedback
            score = calculate_quick_score(prompt)
            feedback = get_score_feedback(score)
            if as_json:
                print(json.dumps({"score": score, **feedback}))
            else:
                print(f"{score}/10 - {feedback['label']}: {feedback['message']}")
            return

        elif cmd == "tokens":
            from promptarchitect.engine.tokens import estimate_tokens
            model = _get_option(args, "--model", "claude")
            tokens = estimate_tokens(prompt, model)
            print(json.dumps({"model": model, "tokens": tokens}) if as_json else f"~{tokens} tokens ({model})")
            return

        Validator().validate_prompt(prompt)

        if cmd == "analyze":
            if remote:
                report = ServiceClient(remote).analyze(prompt)
            else:
                from promptarchitect.core.analyzer import full_report
                report = full_report(prompt).to_dict()
            if as_json:
                print(json.dumps(report, indent=2))
            else:
                _print_report(report)

        elif cmd == "questions":
            if remote:
                questions = ServiceClient(remote).questions(prompt)["questions"]
            else:
                from promptarchitect.core.advisor import suggest_questions
                questions = [q.to_dict() for q in suggest_questions(prompt)]
            if as_json:
                print(json.dumps(questions, indent=2))
            else:
                for q in questions:
                    print(f"\n[{q['label']}] {q['question']}\n   {q['placeholder']}")

        elif cmd == "optimize":
            from promptarchitect import config
            model = _get_option(args, "--model", config.DEFAULT_MODEL)
            level = _get_option(args, "--level", config.DEFAULT_LEVEL)
            style = _get_option(args, "--style", config.DEFAULT_STYLE)
            overrides = {k: True for k in _key_list(_get_option(args, "--enable"))}
            overrides.update({k: False for k in _key_list(_get_option(args, "--disable"))})

            if remote:
                payload = ServiceClient(remote).optimize(prompt, model, level, style, overrides)
            else:
                from promptarchitect.core.optimizer import optimize_for_model
                payload = optimize_for_model(prompt, model, level, style, overrides=overrides)
            if as_json:
                print(json.dumps(payload, indent=2))
            else:
                _print_optimization(payload)

    except ValidationError as e:
        print(f"❌ {e}")
        sys.exit(2)
    except ServiceUnavailable as e:
        print(f"❌ {e}")
        sys.exit(3)


if __name__ == "__main__":
    main()
