from gpt_engine import GatewayError, generate_positioning_outputs
from models import PositioningRequest, WebhookRecord
from webhook import WebhookError, send_to_webhook

FIELDS = [
    ("product_name", "Product name"),
    ("target_audience", "Target audience (e.g., 'independent bookkeepers')"),
    ("pain_points", "Top 3 pain points"),
    ("product_benefit", "Core product benefit"),
    ("competitors", "Key competitors (comma separated)"),
    ("differentiators", "Differentiators"),
]


def main():
    print("Welcome to Claritix — turn vague product descriptions into clear messaging!\n")
    answers = {key: input(f"{label}:\n> ") for key, label in FIELDS}
    inputs = PositioningRequest(**answers)

    problem = inputs.validation_error()
    if problem:
        print(problem)
        return

    print("\nThinking...")
    try:
        result = generate_positioning_outputs(inputs)
    except GatewayError as e:
        print(f"Claritix was unable to process the request: {e}")
        return
    except RuntimeError as e:
        print(f"Configuration problem: {e}")
        return

    print("\n--- Positioning Statement ---\n")
    print(result.positioning)
    print("\n--- Unique Value Proposition ---\n")
    print(result.uvp)
    print("\n--- Tagline ---\n")
    print(result.tagline)
    print("\n--- Strategic Insights ---\n")
    print(result.insights)

    if input("\nSend to webhook? (y/N)\n> ").strip().lower() not in ("y", "yes"):
        return
    try:
        send_to_webhook(WebhookRecord.from_outputs(inputs, result))
    except WebhookError as e:
        print(f"Failed to send data to the webhook: {e}")
        return
    print("Data sent successfully")


if __name__ == "__main__":
    main()
