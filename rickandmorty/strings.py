"""User-facing text."""

# Controller error messages
INITIAL_LOAD_FAILED = "There seems to be a problem on the provider's side..."
NEXT_PAGE_FAILED = "Oups, looks there is some issue.."
PREVIOUS_PAGE_FAILED = "Oups, looks there is some issue.."

# Detail labels
STATUS = "Status:"
SPECIES = "Species:"
TYPE = "Type:"
GENDER = "Gender:"

# Fallbacks
NOT_AVAILABLE = "N/A"
NO_TYPE = "No type"
