import logging
from config.settings import LOG_LEVEL
from processors.contribution_table_generator import ContributionTableGenerator

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

def main():
    """Write the SOCSO/EIS reference tables used to check the calculator"""
    logger.info("Starting Statutory Payroll")

    logger.info("Generating contribution tables...")
    filepath = ContributionTableGenerator().generate()

    print("=" * 60)
    print("Statutory Payroll v0.1.0")
    print("=" * 60)
    print(f"\nContribution tables saved to: {filepath}")
    print("=" * 60)

if __name__ == "__main__":
    main()
