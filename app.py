import aws_cdk as cdk
from config import get_config
from stacks.smoke_test_stack import SmokeTestStack

app = cdk.App()
config = get_config(app)

print("🚀 Executing static website smoke test...")

# =================================================================
# SMOKE TEST STACK
# =================================================================
# CloudFront only accepts ACM certificates from us-east-1, deploy there.
env = cdk.Environment(account=config.account, region=config.region)
SmokeTestStack(
    app, f"StaticWebsiteSmokeTest-{config.name}",
    config=config,
    env=env
)

app.synth()
