"""GraphQL query templates for the Rick and Morty API."""

# One page of characters plus the number of the following page
CHARACTERS_QUERY = """
query Characters($page: Int) {
  characters(page: $page) {
    info {
      next
    }
    results {
      id
      name
      image
    }
  }
}
"""
