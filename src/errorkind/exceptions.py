"""errorkind error hierarchy, built with define_error_type() itself."""

from errorkind.kinds import define_error_type

CustomError = define_error_type("CustomError")

ArgumentOrderError = define_error_type(
    "ArgumentOrderError",
    CustomError,
    {"message": "Arguments out of order.", "code": "EOARG"},
)
