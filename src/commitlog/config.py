"""Default configuration settings for the commitlog tool."""

DEFAULT_CONFIG = {
	# `log` command configuration
	"log": {
		# Number of commits per page
		"count": 50,
		# Number of commits to skip
		"skip": 0,
	},
	# `recent` command configuration
	"recent": {
		"count": 10,
	},
	# `search` command configuration
	"search": {
		# Maximum number of matches
		"count": 50,
	},
	# Table output
	"display": {
		# Whether to print the graph column
		"show_graph": True,
		# Date column: 'relative' or 'iso'
		"date_style": "relative",
	},
}
