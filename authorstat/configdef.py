"""authorstat default configuration file

Every configuration element ever used in the program must exist here.
These defaults may be overridden in the user's config file.
"""


# git program to run
git_program = 'git'

# Character map used in git commit logs
git_log_encoding = 'UTF-8'

# Order in which git log lists commits: 'newest' first or 'oldest' first
log_order = 'newest'

# Group authors whose e-mail addresses differ only in case
email_fold_case = False

# Commits by authors whose names contain any of these are not counted
bot_name_patterns = ['dependabot']

# Module name to show in a leading report column; no column when empty
module_name = ''
