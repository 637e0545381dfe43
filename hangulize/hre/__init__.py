"""HRE: the regular-expression dialect used by spec rules, with its replacement patterns."""