"""Launch and track Ansible Automation Platform jobs and inventory groups."""
