"""Allow running as: python -m proposal_pricing"""

from proposal_pricing.main import cli

if __name__ == "__main__":
    cli()
