"""SBTE portal: subject and department management API."""
